# backend/messaging/models.py
from datetime import datetime
from backend.init_db import db


def _isoformat(value):
    return value.isoformat() + 'Z' if value else None


class Message(db.Model):
    __tablename__ = 'messages'
    id = db.Column(db.Integer, primary_key=True)
    sender_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    sender = db.relationship('User', foreign_keys=[sender_id])
    receiver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    receiver = db.relationship('User', foreign_keys=[receiver_id])
    text = db.Column(db.Text, nullable=False)
    seen = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            '_id': self.id,
            'sender': self.sender_id,
            'receiver': self.receiver_id,
            'text': self.text,
            'seen': self.seen,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at)
        }

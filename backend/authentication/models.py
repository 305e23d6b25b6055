# backend/authentication/models.py
from datetime import datetime
from backend.init_db import db


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(80), nullable=False)
    vehicle_name = db.Column(db.String(80), nullable=False)
    vehicle_number = db.Column(db.String(32), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_public_dict(self):
        """Login projection; never includes the password hash."""
        return {
            '_id': self.id,
            'email': self.email,
            'name': self.name,
            'vehicleName': self.vehicle_name,
            'vehicleNumber': self.vehicle_number
        }

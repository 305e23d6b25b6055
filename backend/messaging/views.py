# backend/messaging/views.py
from sqlalchemy import and_, or_
from sqlalchemy.orm import joinedload
from backend.init_db import db
from backend.messaging.models import Message


def conversation_filter(user_a, user_b):
    return or_(
        and_(Message.sender_id == user_a, Message.receiver_id == user_b),
        and_(Message.sender_id == user_b, Message.receiver_id == user_a)
    )


def mark_conversation_seen(other_user_id, my_user_id):
    """Flip every unseen message from ``other_user_id`` to ``my_user_id``.

    Returns the number of messages updated. Messages sent the other way are
    left alone, so only the receiver opening a chat marks it read.
    """
    updated = Message.query.filter_by(
        sender_id=other_user_id, receiver_id=my_user_id, seen=False
    ).update({'seen': True}, synchronize_session=False)
    db.session.commit()
    return updated


def get_conversation(user_a, user_b):
    return Message.query.filter(conversation_filter(user_a, user_b)) \
        .order_by(Message.created_at.asc(), Message.id.asc()).all()


def get_user_messages(user_id):
    return Message.query.options(joinedload(Message.sender), joinedload(Message.receiver)).filter(
        or_(Message.sender_id == user_id, Message.receiver_id == user_id)
    ).order_by(Message.created_at.desc(), Message.id.desc()).all()


def build_inbox(messages, user_id):
    """Group ``messages`` (newest first) into one entry per counterpart.

    Entries keep the order in which each counterpart first appears. A
    conversation has unread messages when any message received by
    ``user_id`` is still unseen.
    """
    conversations = {}

    for msg in messages:
        other = msg.receiver if msg.sender_id == user_id else msg.sender

        entry = conversations.get(other.id)
        if entry is None:
            entry = conversations[other.id] = {
                'userId': other.id,
                'name': other.name,
                'hasUnread': False
            }

        if msg.receiver_id == user_id and not msg.seen:
            entry['hasUnread'] = True

    return list(conversations.values())

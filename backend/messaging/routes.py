# backend/messaging/routes.py
from flask import Blueprint, request, jsonify
from backend.init_db import db
from backend.logging_config import setup_logging
from backend.decorators import json_body_required
from backend.authentication.models import User
from backend.messaging.models import Message
from backend.messaging.views import mark_conversation_seen, get_conversation, get_user_messages, build_inbox


messaging_bp = Blueprint('messaging', __name__)

logger = setup_logging()


def _parse_user_id(value):
    """Accept an int or a string of ASCII digits; anything else is invalid."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid user id: {value!r}")


@messaging_bp.route('/send', methods=['POST'])
@json_body_required
def send_message():
    data = request.get_json()
    sender_id = data.get('senderId')
    receiver_id = data.get('receiverId')
    text = data.get('text')

    if not sender_id or not receiver_id or not isinstance(text, str) or not text.strip():
        logger.warning("Message send attempt with missing fields.")
        return jsonify({'message': 'All fields required'}), 400

    try:
        sender_id = _parse_user_id(sender_id)
        receiver_id = _parse_user_id(receiver_id)
    except ValueError:
        logger.warning(f"Message send attempt with invalid ids: {sender_id!r}, {receiver_id!r}")
        return jsonify({'message': 'Invalid user id'}), 400

    try:
        if db.session.get(User, sender_id) is None or db.session.get(User, receiver_id) is None:
            logger.warning(f"Message send between unknown users: {sender_id} -> {receiver_id}")
            return jsonify({'message': 'User not found'}), 404

        message = Message(sender_id=sender_id, receiver_id=receiver_id, text=text)
        db.session.add(message)
        db.session.commit()

        logger.info(f"Message {message.id} sent from {sender_id} to {receiver_id}.")
        return jsonify({'message': 'Message sent successfully'}), 200

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error sending message: {e}")
        return jsonify({'message': 'Server error'}), 500


@messaging_bp.route('/chat/<int:other_user_id>/<int:my_user_id>', methods=['GET'])
def get_chat(other_user_id, my_user_id):
    try:
        updated = mark_conversation_seen(other_user_id, my_user_id)
        if updated:
            logger.info(f"Marked {updated} messages from {other_user_id} to {my_user_id} as seen.")

        messages = get_conversation(my_user_id, other_user_id)
        return jsonify([msg.to_dict() for msg in messages]), 200

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error fetching chat {other_user_id}/{my_user_id}: {e}")
        return jsonify({'message': 'Server error'}), 500


@messaging_bp.route('/inbox/<int:user_id>', methods=['GET'])
def get_inbox(user_id):
    try:
        messages = get_user_messages(user_id)
        return jsonify(build_inbox(messages, user_id)), 200

    except Exception as e:
        logger.error(f"Error fetching inbox for {user_id}: {e}")
        return jsonify({'message': 'Server error'}), 500

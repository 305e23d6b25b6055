# backend/authentication/routes.py
from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import IntegrityError
from backend.init_db import db
from backend.logging_config import setup_logging
from backend.decorators import json_body_required
from backend.authentication.models import User
from backend.authentication.views import hash_password, check_password, send_otp


auth_bp = Blueprint('auth', __name__)

# Setup logging
logger = setup_logging()


def _missing(value):
    return not isinstance(value, str) or not value.strip()


def _otp_store():
    return current_app.extensions['otp_store']


@auth_bp.route('/send-otp', methods=['POST'])
@json_body_required
def send_otp_route():
    email = request.get_json().get('email')

    if _missing(email):
        logger.warning("OTP requested without an email.")
        return jsonify({'message': 'Email required'}), 400

    try:
        if User.query.filter_by(email=email).first():
            logger.warning(f"OTP requested for registered email: {email}")
            return jsonify({'message': 'Email already registered'}), 400

        send_otp(_otp_store(), email, current_app.config['DEMO_OTP'])
        return jsonify({'message': 'OTP sent'}), 200

    except Exception as e:
        logger.error(f"Error during send-otp: {e}")
        return jsonify({'message': 'Server error'}), 500


@auth_bp.route('/verify-otp', methods=['POST'])
@json_body_required
def verify_otp_route():
    data = request.get_json()
    email = data.get('email')
    otp = data.get('otp')

    if _missing(email):
        logger.warning("OTP verification without an email.")
        return jsonify({'message': 'Email required'}), 400

    if not _otp_store().verify(email, otp):
        logger.warning(f"Invalid OTP submitted for email: {email}")
        return jsonify({'message': 'Invalid OTP'}), 401

    logger.info(f"OTP verified for email: {email}")
    return jsonify({'message': 'OTP verified'}), 200


@auth_bp.route('/register', methods=['POST'])
@json_body_required
def register():
    try:
        data = request.get_json()
        email = data.get('email')
        name = data.get('name')
        vehicle_name = data.get('vehicleName')
        vehicle_number = data.get('vehicleNumber')
        password = data.get('password')

        if any(_missing(v) for v in (email, name, vehicle_name, vehicle_number, password)):
            logger.warning("Registration attempt with missing fields.")
            return jsonify({'message': 'All fields required'}), 400

        if User.query.filter_by(email=email).first():
            logger.warning(f"Registration attempt with existing email: {email}")
            return jsonify({'message': 'User already exists'}), 400

        if User.query.filter_by(vehicle_number=vehicle_number).first():
            logger.warning(f"Registration attempt with existing vehicle number: {vehicle_number}")
            return jsonify({'message': 'Vehicle number already registered'}), 400

        new_user = User(
            email=email,
            name=name,
            vehicle_name=vehicle_name,
            vehicle_number=vehicle_number,
            password=hash_password(password)
        )
        db.session.add(new_user)
        db.session.commit()

        logger.info(f"New user {email} registered successfully.")
        return jsonify({'message': 'Account created'}), 200

    except IntegrityError as e:
        # A concurrent registration won the unique constraint
        db.session.rollback()
        logger.warning(f"Registration conflict for email {email}: {e}")
        return jsonify({'message': 'User already exists'}), 400

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error during registration: {e}")
        return jsonify({'message': 'Server error'}), 500


@auth_bp.route('/login', methods=['POST'])
@json_body_required
def login():
    try:
        data = request.get_json()
        email = data.get('email')
        password = data.get('password')

        if _missing(email) or _missing(password):
            logger.warning("Login attempt with missing fields.")
            return jsonify({'message': 'Email and password required'}), 400

        user = User.query.filter_by(email=email).first()

        # Same response for unknown email and wrong password
        if not user or not check_password(user.password, password):
            logger.warning(f"Failed login attempt for email: {email}")
            return jsonify({'message': 'Invalid credentials'}), 401

        logger.info(f"User {email} logged in successfully.")
        return jsonify({'message': 'Login successful', 'user': user.to_public_dict()}), 200

    except Exception as e:
        logger.error(f"Error during login: {e}")
        return jsonify({'message': 'Server error'}), 500

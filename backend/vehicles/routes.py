# backend/vehicles/routes.py
from flask import Blueprint, jsonify
from backend.logging_config import setup_logging
from backend.authentication.models import User


vehicles_bp = Blueprint('vehicles', __name__)

logger = setup_logging()


@vehicles_bp.route('/<vnum>', methods=['GET'])
def lookup_vehicle(vnum):
    try:
        owner = User.query.filter_by(vehicle_number=vnum).first()
    except Exception as e:
        logger.error(f"Error looking up vehicle {vnum}: {e}")
        return jsonify({'message': 'Server error'}), 500

    if not owner:
        logger.info(f"Vehicle lookup miss: {vnum}")
        return jsonify({'message': 'Vehicle not found'}), 404

    return jsonify({
        'ownerId': owner.id,
        'ownerName': owner.name,
        'vehicleName': owner.vehicle_name
    }), 200

# backend/config.py
import os
import binascii
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY') or binascii.hexlify(os.urandom(24)).decode()

    BASE_DIR = os.path.abspath(os.path.dirname(__file__))

    DATABASE_PATH = os.path.join(BASE_DIR, 'vehicle_contact.db')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', f'sqlite:///{DATABASE_PATH}')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PORT = int(os.getenv('PORT', 5000))

    # Demo code; no OTP is actually delivered
    DEMO_OTP = os.getenv('DEMO_OTP', '123456')
    OTP_VALIDITY_MINUTES = int(os.getenv('OTP_VALIDITY_MINUTES', 10))
    OTP_CACHE_SIZE = int(os.getenv('OTP_CACHE_SIZE', 10000))

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    LOG_TIMEZONE = os.getenv('LOG_TIMEZONE', 'Asia/Kolkata')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    DEMO_OTP = '123456'
    OTP_VALIDITY_MINUTES = 10

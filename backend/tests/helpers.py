import unittest

from backend.app_factory import create_app
from backend.init_db import db


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.app = create_app('backend.config.TestingConfig')
        self.client = self.app.test_client()
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def register(self, email='asha@example.com', name='Asha', vehicle_name='Swift',
                 vehicle_number='KA01AB1234', password='s3cret!'):
        return self.client.post('/auth/register', json={
            'email': email,
            'name': name,
            'vehicleName': vehicle_name,
            'vehicleNumber': vehicle_number,
            'password': password,
        })

    def register_and_login(self, email, vehicle_number, name='User', password='pw123!'):
        self.register(email=email, name=name, vehicle_number=vehicle_number, password=password)
        response = self.client.post('/auth/login', json={'email': email, 'password': password})
        return response.get_json()['user']['_id']

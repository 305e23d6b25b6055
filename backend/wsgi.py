# backend/wsgi.py
from backend.app_factory import create_app

app = create_app()


def main():
    app.run(host='0.0.0.0', port=app.config['PORT'])


if __name__ == '__main__':
    main()

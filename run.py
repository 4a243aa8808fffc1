import os
import sys
from app import create_app, db
from models.database import init_sample_data
from flask_migrate import Migrate

app = create_app()
migrate = Migrate(app, db)

def setup_database(reset=False):
    """Create tables and seed hotels, rooms and the demo guest"""
    with app.app_context():
        if reset:
            print("Dropping existing tables...")
            db.drop_all()
        print("Creating database tables...")
        db.create_all()
        print("Initializing sample data...")
        init_sample_data()
        print("Database initialization complete!")

if __name__ == '__main__':
    command = sys.argv[1] if len(sys.argv) > 1 else None

    if command == '--init-db':
        setup_database()
    elif command == '--reset-db':
        setup_database(reset=True)
    else:
        port = int(os.environ.get('PORT', 5000))
        app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port)

import os
from voyage import create_app

# Gunicorn entry point
app = create_app(os.environ.get("FLASK_ENV", "production"))

# storefront/extensions.py
from flask_cors import CORS

from .storage import MediaStore, RecordStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

# Both stores follow the same init_app pattern; paths come from app.config
store = RecordStore()
media = MediaStore()

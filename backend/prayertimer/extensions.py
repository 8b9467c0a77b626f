# prayertimer/extensions.py

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_smorest import Api

# Limiter extension (rate limiting); routes may override the defaults
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "200 per hour"]
)

cors = CORS()

# Flask-Smorest API
api = Api()

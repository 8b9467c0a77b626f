# prayertimer/routes/main_routes.py

from flask import current_app
from flask_smorest import Blueprint

from ..schemas import MessageSchema

main_bp = Blueprint('Main', __name__, url_prefix='/')

@main_bp.route('/')
@main_bp.response(200, MessageSchema)
def index():
    """
    Main endpoint for the API.
    """
    return {"message": f"Welcome to the {current_app.config.get('API_TITLE')}!"}

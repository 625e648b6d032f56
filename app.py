from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS  # Enable CORS for cross-origin requests
from werkzeug.exceptions import HTTPException

from auth import authenticate_user, register_user
from config import Config
from user_store import UserStore

api = Blueprint("api", __name__, url_prefix="/api")


def _users():
    return current_app.extensions["user_store"]


# Just to check the server is up
@api.route("", methods=["GET"])
def version():
    return jsonify(version=current_app.config["API_VERSION"]), 200


def _request_body():
    # Missing or malformed bodies are treated as an empty object
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error_response(errors):
    return jsonify(errors=[error.to_dict() for error in errors]), 400


@api.route("/register", methods=["POST"])
def register():
    users = _users()
    position, errors = register_user(users, _request_body())
    if errors:
        current_app.logger.info("Registration rejected: %s", [e.message for e in errors])
        return _error_response(errors)

    current_app.logger.info("Registered user at position %d", position)
    return jsonify(users.get(position)), 200


@api.route("/login", methods=["POST"])
def login():
    users = _users()
    position, errors = authenticate_user(users, _request_body())
    if errors:
        current_app.logger.info("Login rejected: %s", [e.message for e in errors])
        return _error_response(errors)

    current_app.logger.info("Login for user at position %d", position)
    return jsonify(users.get(position)), 200


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify(error=e.description), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        app.logger.exception("Unhandled error: %s", e)
        return jsonify(error="Internal server error"), 500


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    app.logger.setLevel(app.config["LOG_LEVEL"])
    CORS(app, origins=app.config["CORS_ORIGINS"])  # Enable CORS for all routes

    # Each app owns its own store, a fresh app starts with no users
    app.extensions["user_store"] = UserStore()

    app.register_blueprint(api)
    register_error_handlers(app)
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"])

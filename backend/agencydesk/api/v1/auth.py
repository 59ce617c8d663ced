from flask import request, jsonify
from flask_jwt_extended import create_access_token
from agencydesk.domain.exceptions import Forbidden, Unauthorized, ValidationError
from agencydesk.models.user import User
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        raise ValidationError("Invalid request body")

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        raise ValidationError("Email and password required")

    user = User.query.filter_by(email=email.strip().lower()).first()

    if not user or not user.check_password(password):
        raise Unauthorized("Invalid credentials")

    if not user.is_active:
        raise Forbidden("User account disabled")

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role},
    )

    return jsonify({
        "access_token": access_token,
        "user_id": user.id,
    }), 200

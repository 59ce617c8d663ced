# agencydesk/api/v1/events.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from agencydesk.utils.decorators import (
    org_member_required,
    roles_required,
    feature_enabled,
    READ_ROLES,
    WRITE_ROLES,
)
from agencydesk.application.events.events import create_event, list_events, get_event
from agencydesk.application.events.event_instances import (
    generate_event_instances,
    list_event_instances,
    get_event_instance,
    update_event_instance,
    delete_event_instance,
)
from agencydesk.normalizers.event import normalize_event, normalize_event_instance
from . import v1_bp


# ------------------------
# Events
# ------------------------

@v1_bp.route("/businesses/<org_id>/events", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("events")
def list_events_route(org_id):
    return jsonify({"events": [normalize_event(e) for e in list_events(g.store)]})


@v1_bp.route("/businesses/<org_id>/events", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("events")
def create_event_route(org_id):
    data = request.get_json(silent=True) or {}
    event = create_event(g.store, data=data)

    return jsonify({"event": normalize_event(event)}), 201


@v1_bp.route("/businesses/<org_id>/events/<event_id>", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("events")
def get_event_route(org_id, event_id):
    return jsonify({"event": normalize_event(get_event(g.store, event_id))})


# ------------------------
# Event instances
# ------------------------

@v1_bp.route("/businesses/<org_id>/events/<event_id>/instances", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("events")
def list_event_instances_route(org_id, event_id):
    instances = list_event_instances(g.store, event_id=event_id)

    return jsonify({"instances": [normalize_event_instance(i) for i in instances]})


@v1_bp.route("/businesses/<org_id>/events/<event_id>/instances/generate", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("events")
def generate_event_instances_route(org_id, event_id):
    data = request.get_json(silent=True) or {}

    instances = generate_event_instances(
        g.store,
        event_id=event_id,
        day_of_week=data.get("day_of_week"),
        start_date=data.get("start_date"),
        end_date=data.get("end_date"),
    )

    return jsonify({
        "instances": [normalize_event_instance(i) for i in instances],
        "count": len(instances),
    }), 201


@v1_bp.route("/businesses/<org_id>/events/<event_id>/instances/<instance_id>", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("events")
def get_event_instance_route(org_id, event_id, instance_id):
    instance = get_event_instance(g.store, event_id=event_id, instance_id=instance_id)

    return jsonify({"instance": normalize_event_instance(instance)})


@v1_bp.route("/businesses/<org_id>/events/<event_id>/instances/<instance_id>", methods=["PATCH"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("events")
def update_event_instance_route(org_id, event_id, instance_id):
    data = request.get_json(silent=True) or {}
    instance = update_event_instance(
        g.store,
        event_id=event_id,
        instance_id=instance_id,
        data=data,
    )

    return jsonify({"instance": normalize_event_instance(instance)})


@v1_bp.route("/businesses/<org_id>/events/<event_id>/instances/<instance_id>", methods=["DELETE"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("events")
def delete_event_instance_route(org_id, event_id, instance_id):
    delete_event_instance(g.store, event_id=event_id, instance_id=instance_id)

    return jsonify({"success": True})

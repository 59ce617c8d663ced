import pytest
from flask_jwt_extended import create_access_token

from agencydesk import create_app
from agencydesk.extensions import db
from agencydesk.models.business import Business
from agencydesk.models.membership import Membership
from agencydesk.models.user import User
from agencydesk.store import StoreContext

from helpers import PASSWORD

# Imported for table registration before create_all
import agencydesk.models.audit_log  # noqa: F401
import agencydesk.models.event  # noqa: F401
import agencydesk.models.event_instance  # noqa: F401
import agencydesk.models.page  # noqa: F401
import agencydesk.models.preview_token  # noqa: F401
import agencydesk.models.section  # noqa: F401


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_business(name, slug, **flags):
    business = Business(name=name, slug=slug, **flags)
    db.session.add(business)
    db.session.commit()
    return business


def _make_user(email, role="user"):
    user = User(email=email, role=role)
    user.set_password(PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


def _add_member(org, user, role):
    db.session.add(Membership(org_id=org.id, user_id=user.id, role=role))
    db.session.commit()


@pytest.fixture
def org(app):
    return _make_business("Blue Door Cafe", "blue-door")


@pytest.fixture
def other_org(app):
    return _make_business("Red Roof Diner", "red-roof")


@pytest.fixture
def users(org, other_org):
    owner = _make_user("owner@bluedoor.test")
    editor = _make_user("editor@bluedoor.test")
    viewer = _make_user("viewer@bluedoor.test")
    outsider = _make_user("owner@redroof.test")

    _add_member(org, owner, "owner")
    _add_member(org, editor, "editor")
    _add_member(org, viewer, "viewer")
    _add_member(other_org, outsider, "owner")

    return {"owner": owner, "editor": editor, "viewer": viewer, "outsider": outsider}


@pytest.fixture
def ctx(org, users):
    return StoreContext.for_user(org_id=org.id, user_id=users["owner"].id, role="owner")


@pytest.fixture
def other_ctx(other_org, users):
    return StoreContext.for_user(
        org_id=other_org.id, user_id=users["outsider"].id, role="owner"
    )


@pytest.fixture
def auth_headers(users):
    def _headers(name="owner"):
        token = create_access_token(identity=users[name].id)
        return {"Authorization": f"Bearer {token}"}
    return _headers

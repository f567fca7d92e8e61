import pytest

from hr_dashboard.core.enums import ADMIN_ROLES, Role, VIEWER_ROLES
from hr_dashboard.core.exceptions import AuthenticationError, AuthorizationError
from hr_dashboard.tenancy.context import AuthContext, tenant_key


def test_tenant_key_replaces_at_and_dots():
    assert tenant_key("hr.team@acme.co.in") == "hr_team_acme_co_in"
    assert tenant_key("  owner@example.com ") == "owner_example_com"


def test_tenant_key_requires_email():
    with pytest.raises(AuthenticationError):
        tenant_key("")


def test_from_session():
    auth = AuthContext.from_session({"email": "owner@example.com", "role": "manager", "name": "Owner"})

    assert auth.role == Role.MANAGER
    assert auth.tenant == "owner_example_com"
    auth.require_role(VIEWER_ROLES)
    with pytest.raises(AuthorizationError):
        auth.require_role(ADMIN_ROLES)


@pytest.mark.parametrize("session", [{}, {"email": "a@b.c"}, {"email": "a@b.c", "role": "intern"}])
def test_from_session_rejects_incomplete_identity(session):
    with pytest.raises(AuthenticationError):
        AuthContext.from_session(session)

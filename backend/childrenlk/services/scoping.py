"""Organization scoping applied to every organizer-visible query."""

from sqlalchemy import false, true

from childrenlk.dependencies.auth import Principal


def organization_scope(model, principal: Principal):
    """WHERE clause limiting ``model`` rows to what ``principal`` may see.

    Admins see every organization. Organizers see only their own; one without
    an organization sees nothing. Rows outside the scope are reported as not
    found by callers, never as forbidden.
    """
    if principal.is_admin:
        return true()
    if principal.organization_id is None:
        return false()
    return model.organization_id == principal.organization_id

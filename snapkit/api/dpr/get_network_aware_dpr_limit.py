from ..network.ConnectionInfo import ConnectionInfo


def get_network_aware_dpr_limit(connection: ConnectionInfo | None = None) -> int:
    """Highest pixel ratio worth requesting on this connection.

    Returns 3 when no hints are available.
    """
    if connection is None:
        return 3
    if connection.save_data:
        return 1
    if connection.effective_type in ("slow-2g", "2g"):
        return 1
    if connection.effective_type == "3g":
        return 2
    return 3

from .ConnectionInfo import ConnectionInfo


def adjust_quality_for_connection(
    base_quality: int = 85,
    connection_type: str | None = None,
    connection: ConnectionInfo | None = None,
) -> int:
    """Lower image quality for slow or metered connections.

    Args:
        base_quality: Quality before adjustment
        connection_type: Effective type override; replaces connection.effective_type
        connection: Ambient hints from the host

    Returns:
        Adjusted quality: data saver -30 (floor 40), 2g-class -40 (floor 30),
        3g -20 (floor 50), anything else unchanged
    """
    effective_type = connection_type or (connection.effective_type if connection else None)
    save_data = bool(connection and connection.save_data)

    if save_data:
        return max(40, base_quality - 30)

    if effective_type in ("slow-2g", "2g"):
        return max(30, base_quality - 40)
    if effective_type == "3g":
        return max(50, base_quality - 20)
    return base_quality

NAME = "prefixline"


def get_version() -> str:
    """Get the current version of Prefixline.

    Returns:
        str: Version string, e.g "1.2.3"
    """
    from importlib.metadata import version

    try:
        return version("prefixline")
    except Exception:
        return "0.1.0unknown"

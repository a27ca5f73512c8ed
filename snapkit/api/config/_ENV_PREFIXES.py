# Framework prefixes checked before the bare variable name, first non-empty wins
ENV_PREFIXES: tuple[str, ...] = ("REACT_APP_", "NEXT_PUBLIC_", "")

ORGANIZATION_VAR = "SNAPKIT_ORGANIZATION_NAME"
QUALITY_VAR = "SNAPKIT_DEFAULT_QUALITY"
FORMAT_VAR = "SNAPKIT_DEFAULT_OPTIMIZE_FORMAT"

"""Show resolved configuration command."""

from collections.abc import Iterator

from ..engine.ConfigError import ConfigError
from ..StageResult import StageResult
from .get_env_config import get_env_config
from .merge_config_with_env import merge_config_with_env
from .validate_env_config import validate_env_config


def cmd_show(organization_name: str | None = None, strict: bool = False) -> StageResult:
    """Show the engine configuration resolved from explicit values and the environment.

    Args:
        organization_name: Explicit organization; overrides the environment
        strict: Treat a missing organization in the environment as an error
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Reading environment...")
        env = get_env_config()
        validation = validate_env_config(env, strict=strict)
        all_errors: list[str] = list(validation["errors"])
        all_warnings: list[str] = list(validation["warnings"])

        yield (0.7, "Merging configuration...")
        content: dict = {}
        try:
            config = merge_config_with_env({"organization_name": organization_name}, strict=strict)
            content = config.to_dict()
        except ConfigError as e:
            all_errors.extend(error for error in e.errors if error not in all_errors)

        yield (1.0, "Complete")
        result_obj.success = len(all_errors) == 0
        result_obj.result = "Configuration resolved" if result_obj.success else "Configuration is invalid"
        result_obj.output = {
            "errors": all_errors,
            "warnings": all_warnings,
            "content": content,
            "environment": env.to_dict(),
        }

    return StageResult(announce="Resolving engine configuration...", progress_callback=do_work)

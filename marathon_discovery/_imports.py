"""Import guard for the optional extras of marathon-discovery."""


def require_optional_dependency(
    module_name: str,
    package_name: str,
    install_extra: str,
) -> None:
    """
    Fail the import of ``package_name`` unless ``module_name`` is importable.

    Used by ``marathon_discovery.fastapi``, which needs the ``fastapi`` extra.

    Raises:
        ImportError: Naming the pip extra that provides the module.
    """
    try:
        __import__(module_name)
    except ImportError as e:
        raise ImportError(
            f"'{package_name}' requires '{module_name}' which is not installed.\n"
            f"Install it with: pip install marathon-discovery[{install_extra}]"
        ) from e

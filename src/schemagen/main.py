# main.py
import asyncio
import logging
import sys
import uuid
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from schemagen.adapters.datamodel_codegen_adapter import DatamodelCodeGenerator
from schemagen.adapters.logging_adapter import LoggingAdapter
from schemagen.adapters.pyperclip_clipboard_adapter import PyperclipClipboard
from schemagen.adapters.retry_tenacity import RetryExecutor
from schemagen.adapters.schema_file_adapter import JsonFileSchemaSource
from schemagen.core.config import CodegenConfig
from schemagen.core.exceptions import SchemagenError
from schemagen.core.logging_config import coerce_level, configure_logging, correlation_id_var
from schemagen.core.managers.codegen_manager import CodegenManager
from schemagen.core.settings import SchemagenSettings, app_settings, get_logger, set_logger


# main lives at the outermost layer (not in core)
# Instantiates all the concrete adapters
# Wires dependencies together
# Runs one generate/copy session

def build_manager(settings: SchemagenSettings) -> CodegenManager:
    return CodegenManager(
        schema_source=JsonFileSchemaSource(),
        generator=DatamodelCodeGenerator(),
        clipboard=PyperclipClipboard(),
        retry_port=RetryExecutor(),
        config=CodegenConfig.from_app_settings(settings),
        logger=get_logger(),
    )


@click.command()
@click.argument(
    "schema_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("-n", "--namespace", help="Namespace for the generated code")
@click.option(
    "--print", "print_code", is_flag=True,
    help="Print the generated code instead of copying it to the clipboard",
)
def main(schema_file: Optional[Path], namespace: Optional[str], print_code: bool) -> None:
    """Generate code from a JSON Schema file and copy it to the clipboard."""
    # Central logging configuration BEFORE injecting adapter
    configure_logging(
        app_settings.SCHEMAGEN_LOG_LEVEL,
        quiet_retries=app_settings.SCHEMAGEN_QUIET_RETRIES,
    )
    set_logger(LoggingAdapter("schemagen", app_settings.SCHEMAGEN_LOG_LEVEL))
    correlation_id_var.set(uuid.uuid4().hex[:8])
    logger = get_logger()

    if coerce_level(app_settings.SCHEMAGEN_LOG_LEVEL) <= logging.DEBUG:
        app_settings.print_settings(logger)

    try:
        manager = build_manager(app_settings)
    except ValidationError as exc:
        logger.error(f"[main] invalid configuration error_count={exc.error_count()}")
        raise click.UsageError(f"Invalid configuration: {exc}")
    manager.schema_path = schema_file or app_settings.SCHEMAGEN_SCHEMA_FILE
    if namespace:
        manager.namespace = namespace
    if not manager.can_generate():
        raise click.UsageError("No schema file given and SCHEMAGEN_SCHEMA_FILE is not set")

    try:
        code = asyncio.run(manager.generate())
        if print_code:
            click.echo(code)
        else:
            manager.copy()
            click.echo(f"Copied {len(code)} characters of generated code")
    except SchemagenError as exc:
        logger.error(f"[main] {exc.message} diagnostic={exc.diagnostic}")
        sys.exit(1)


if __name__ == "__main__":
    main()

import json
import logging
from pathlib import Path

import click

from .pipeline import CodegenError, CodeGeneratorConfig, OptionalStyle, OutputMode, PipelineGenerator

logger = logging.getLogger(__name__)


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Module name (defaults to the model's moduleName, then the file stem)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--optional-style",
    default=None,
    type=click.Choice([style.value for style in OptionalStyle]),
    help="C++ optional type for non-required accessors (overrides config file)",
)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def objc_struct_codegen(name, config, optional_style, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        model = json.load(f)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if optional_style is not None:
        config.optional_style = OptionalStyle(optional_style)
    if force:
        config.output.mode = OutputMode.FORCE

    if name is None and not (isinstance(model, dict) and model.get("moduleName")):
        name = Path(path).stem

    try:
        codegen = PipelineGenerator(name, model, config)
        codegen.write(Path(output))
    except (CodegenError, FileExistsError) as e:
        logger.debug("Generation failed", exc_info=True)
        raise click.ClickException(str(e)) from e

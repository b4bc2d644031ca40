"""Render command implementation."""

import logging
from argparse import Namespace
from pathlib import Path

from template_engine.context import build_context
from template_engine.exceptions import ContextValidationError, TemplateRenderError
from template_engine.processor import TemplateProcessor


logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


def default_output_path(template_path: Path) -> Path:
    """index.html -> index.rhtml"""
    return template_path.with_suffix('.rhtml')


def configure_logging(args: Namespace) -> None:
    log_level = LOG_LEVELS[args.log_level]
    if args.debug or args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def render_template(args: Namespace) -> int:
    """
    Render a template file to its output file.

    Returns:
        0 on success, 1 on missing files or I/O failure, 2 on context or
        render errors
    """
    configure_logging(args)

    template_path = Path(args.template)
    if not template_path.exists():
        logger.error(f"Template file not found: {template_path}")
        return 1

    output_path = Path(args.output) if args.output else default_output_path(template_path)

    try:
        context = build_context(
            pairs=args.context,
            context_file=args.context_file,
            sample=args.sample_context
        )

        logger.info(f"Rendering template: {template_path}")
        # newline='' keeps lone "\r" inside lines
        with open(template_path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()

        processor = TemplateProcessor(on_error=args.on_error)
        result = processor.process_text(text, context)

        if args.dry_run:
            logger.info(f"[DRY RUN] Would write {len(result.output_lines)} lines to: {output_path}")
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8', newline='') as f:
                f.write(result.to_text())
            logger.info(f"Wrote rendered output to: {output_path}")

        if not result.ok:
            for error in result.errors:
                logger.error(f"Line {error.line_number}: {error.message}")
            return 2

        return 0

    except TemplateRenderError as e:
        for error in e.errors:
            logger.error(f"Render error at line {error.line_number}: {error.message}")
        return e.exit_code
    except ContextValidationError as e:
        logger.error(f"Context error: {e}")
        return e.exit_code
    except UnicodeDecodeError as e:
        logger.error(f"Template is not valid UTF-8: {template_path}: {e}")
        return 1
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

"""AuditGate - dependency vulnerability practice checker.

Evaluates every applicable registered practice for each project directory
given on the command line and reports the verdicts.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from args import parse_args
from cli_config import apply_audit_overrides, load_config
from common.logging_utils import add_file_handler, configure_logging, is_debug_enabled
from constants import Constants, ExitCodes, PracticeEvaluationResult, ProgrammingLanguage
from context import PracticeContext
from practices import iter_practices

logger = logging.getLogger(__name__)


def build_contexts(directories, language):
    """Builds one PracticeContext per project directory.

    Args:
        directories (list): Project root directories.
        language (ProgrammingLanguage): Declared language of every project.

    Returns:
        list: PracticeContext instances, in argument order.
    """
    contexts = []
    for directory in directories:
        if not os.path.isdir(directory):
            logging.error("Directory not found: %s, aborting", directory)
            sys.exit(ExitCodes.FILE_ERROR.value)
        contexts.append(PracticeContext.for_directory(os.path.abspath(directory), language))
    return contexts


def evaluate_contexts(contexts):
    """Evaluates every applicable practice against every context.

    Returns:
        list: dicts with the practice, the context and the verdict.
    """
    results = []
    for ctx in contexts:
        for practice in iter_practices():
            if not practice.is_applicable(ctx):
                if is_debug_enabled(logger):
                    logger.debug("Skipping %s for %s", practice.metadata.id,
                                 ctx.project_component.path)
                continue
            verdict = practice.evaluate(ctx)
            logger.debug("%s -> %s for %s", practice.metadata.id, verdict.value,
                         ctx.project_component.path)
            results.append({"practice": practice, "context": ctx, "verdict": verdict})
    return results


def report_results(results, quiet=False):
    """Prints verdicts to the console.

    Practices flagged report_only_once print their notice a single time
    per run, however many components violate them.
    """
    if quiet:
        return
    reported = set()
    for result in results:
        metadata = result["practice"].metadata
        path = result["context"].project_component.path
        verdict = result["verdict"]
        print(f"{Constants.RESULT_PREFIX} {metadata.id} [{verdict.value}] {path}")
        if verdict is not PracticeEvaluationResult.NOT_PRACTICING:
            continue
        if metadata.report_only_once and metadata.id in reported:
            continue
        reported.add(metadata.id)
        print(f"  {metadata.name} (impact: {metadata.impact.value})")
        print(f"  {metadata.suggestion}")
        if metadata.url:
            print(f"  See: {metadata.url}")


def export_json(results, path):
    """Exports the verdicts to a JSON file.

    Args:
        results (list): Evaluation results from evaluate_contexts.
        path (str): File path to export the JSON.
    """
    data = []
    for result in results:
        metadata = result["practice"].metadata
        data.append({
            "practice": metadata.id,
            "name": metadata.name,
            "impact": metadata.impact.value,
            "component": result["context"].project_component.path,
            "language": result["context"].project_component.language.value,
            "evaluation": result["verdict"].value,
            "suggestion": metadata.suggestion,
            "url": metadata.url,
        })
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)
        logger.info("Logging to file: %s", args.LOG_FILE)

    config = load_config(args.CONFIG)
    if config:
        logger.info("Loaded config from: %s", args.CONFIG)
    apply_audit_overrides(args, config)

    language = ProgrammingLanguage(args.LANGUAGE)
    contexts = build_contexts(args.FROM_SRC, language)
    results = evaluate_contexts(contexts)
    if not results:
        logging.warning("No practice applies to language '%s'.", language.value)

    report_results(results, quiet=args.QUIET)
    if args.OUTPUT:
        export_json(results, args.OUTPUT)

    violated = any(
        r["verdict"] is PracticeEvaluationResult.NOT_PRACTICING for r in results
    )
    if violated:
        logging.warning("One or more practices are not followed.")
        if args.ERROR_ON_WARNINGS:
            logging.error("Warnings present, exiting with non-zero status code.")
            sys.exit(ExitCodes.EXIT_WARNINGS.value)

    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()

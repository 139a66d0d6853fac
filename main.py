"""主程序入口 - 记法转换/求值并打印逐步过程"""
import argparse
import json
import logging

from config.config import CLI_CONFIG, LOGGING_CONFIG, OPERATION_NAMES, validate_config
from core import run_operation, is_evaluation
from core.operators import format_number
from validation.consistency import cross_check_expressions

logger = logging.getLogger(__name__)


def format_result(operation, result):
    if is_evaluation(operation):
        return format_number(result.result)
    return result.result


def save_results(path, operation, expression, result):
    """把本次计算写成文本摘要"""
    logger.info(f"Saving results to {path}")
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("=== Notation Lab ===\n")
            f.write(f"Operation: {operation}\n")
            f.write(f"Input: {expression}\n")
            f.write(f"Result: {format_result(operation, result)}\n")
            f.write(f"Steps: {len(result.steps)}\n\n")
            for i, step in enumerate(result.steps):
                f.write(f"{i}. [{step.token}] {step.action}\n")
    except OSError as e:
        logger.error(f"Failed to save results to {path}: {e}")
        raise


def main(args):
    validate_config()

    if args.cross_check:
        logger.info("=== Consistency checks ===")
        cv_results = cross_check_expressions(args.cross_check)
        for expression, checks in cv_results.items():
            logger.info(f"{expression}: {checks}")
        return cv_results

    result = run_operation(args.operation, args.expression)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        frame = result.to_frame()
        if len(frame):
            print(frame.to_string())
        print(f"Result: {format_result(args.operation, result)}")

    if args.save_steps:
        logger.info(f"Saving steps to {args.steps_path}")
        result.to_frame().to_csv(args.steps_path)

    if args.save_results:
        save_results(args.results_path, args.operation, args.expression, result)

    return result


def build_parser():
    parser = argparse.ArgumentParser(description="Infix / postfix / prefix converter and evaluator")

    parser.add_argument(
        "--operation",
        type=str,
        choices=OPERATION_NAMES,
        default=CLI_CONFIG["default_operation"],
        help="Conversion or evaluation to run"
    )
    parser.add_argument(
        "--expression",
        type=str,
        default=CLI_CONFIG["default_expression"],
        help="Expression with single-character operands, e.g. 'A+B*C' or '234*+'"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the steps and result as JSON"
    )
    parser.add_argument(
        "--save_steps",
        action="store_true",
        help="Save the step table to a CSV file"
    )
    parser.add_argument(
        "--steps_path",
        type=str,
        default=CLI_CONFIG["steps_path"],
        help="Path to save the step table"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save a text summary of the run"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=CLI_CONFIG["results_path"],
        help="Path to save the text summary"
    )
    parser.add_argument(
        "--cross_check",
        nargs="+",
        metavar="EXPR",
        help="Run round-trip and evaluation consistency checks on infix expressions"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format=LOGGING_CONFIG["format"])
    main(args)

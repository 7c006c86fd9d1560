#!/usr/bin/env python3
"""
Terraform State Backend Bootstrap
Creates the S3 state bucket and DynamoDB lock table, then prints the backend block.

Usage:
    tfstate-bootstrap <aws_region> <environment> <aws_account_id>
    tfstate-bootstrap-config [CONFIG_FILE]
"""
import argparse
import sys
from typing import List, Optional

from .errors import ConfigError, ProvisioningError
from .models import NamingScheme, ProvisioningRequest, resource_names
from .utils.config import get_settings
from .utils.config_file import DEFAULT_CONFIG_FILE, load_request
from .utils.logger import setup_logging, get_logger, print_banner
from .workflow import ProvisioningWorkflow

setup_logging()
logger = get_logger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--backend-file",
        metavar="PATH",
        help="Also write the backend configuration to this file (e.g. backend.tf)"
    )


def build_arguments_parser() -> argparse.ArgumentParser:
    """Parser for the positional-argument variant."""
    parser = argparse.ArgumentParser(
        prog="tfstate-bootstrap",
        description="Create the S3 bucket and DynamoDB table for a Terraform state backend. "
                    "Resources are named terraform-state-<account_id>-<environment> and "
                    "terraform-locks-<account_id>-<environment>."
    )
    parser.add_argument("aws_region", help="AWS region, e.g. eu-west-1")
    parser.add_argument("environment", help="Environment name, e.g. dev")
    parser.add_argument("aws_account_id", help="AWS account id")
    _add_common_arguments(parser)
    return parser


def build_config_parser() -> argparse.ArgumentParser:
    """Parser for the config-file variant."""
    parser = argparse.ArgumentParser(
        prog="tfstate-bootstrap-config",
        description="Create the S3 bucket and DynamoDB table for a Terraform state backend "
                    "from a KEY=value file with AWS_REGION, ENVIRONMENT and POSTFIX. "
                    "Resources are named terraform-state-<postfix> and terraform-locks-<postfix>."
    )
    parser.add_argument(
        "config_file",
        nargs="?",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to the config file (default: {DEFAULT_CONFIG_FILE})"
    )
    _add_common_arguments(parser)
    return parser


def run(request: ProvisioningRequest, backend_file: Optional[str] = None) -> int:
    """
    Provision the backend for `request` and report the outcome.

    Returns:
        Process exit code (0 on success, 1 on any fatal error)
    """
    settings = get_settings()
    names = resource_names(request)

    print_banner("TERRAFORM STATE BACKEND BOOTSTRAP", {
        "environment": "LocalStack (Dev)" if settings.is_local_environment else "AWS",
        "region": request.region,
        "naming_scheme": request.naming.value,
        "s3_bucket": names.bucket_name,
        "dynamodb_table": names.table_name,
    })

    try:
        workflow = ProvisioningWorkflow.for_region(request.region, settings)
        result = workflow.provision(request)
    except ProvisioningError as e:
        logger.error("provisioning_failed", error_type=type(e).__name__, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print("\nTerraform backend configuration:\n")
    print(result.backend_config)
    print("Add this configuration to your Terraform project's main.tf file "
          "(or a separate backend.tf file).")

    if backend_file:
        try:
            result.backend.write(backend_file)
        except OSError as e:
            logger.error("backend_config_write_failed", path=backend_file, error=str(e))
            print(f"Error: could not write '{backend_file}': {e}", file=sys.stderr)
            return 1

    return 0


def _guard(func):
    try:
        return func()
    except KeyboardInterrupt:
        logger.info("interrupted_by_user")
        print("\nStopped by user", file=sys.stderr)
        return 130


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: `tfstate-bootstrap <aws_region> <environment> <aws_account_id>`."""
    args = build_arguments_parser().parse_args(argv)

    def _run():
        try:
            request = ProvisioningRequest(
                region=args.aws_region.strip(),
                environment=args.environment.strip(),
                account_id_or_postfix=args.aws_account_id.strip(),
                naming=NamingScheme.ACCOUNT_ENVIRONMENT,
            )
        except ConfigError as e:
            logger.error("invalid_arguments", error=e.message)
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        return run(request, args.backend_file)

    return _guard(_run)


def main_config(argv: Optional[List[str]] = None) -> int:
    """Entry point: `tfstate-bootstrap-config [CONFIG_FILE]`."""
    args = build_config_parser().parse_args(argv)

    def _run():
        try:
            request = load_request(args.config_file)
        except ConfigError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        return run(request, args.backend_file)

    return _guard(_run)


if __name__ == "__main__":
    sys.exit(main())

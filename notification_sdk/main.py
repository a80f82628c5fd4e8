"""Command line entry point for sending notifications."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from notification_sdk.client import NotificationServiceClient, create_client
from notification_sdk.config.environment import load_environment_config
from notification_sdk.config.exceptions import ConfigurationError
from notification_sdk.config.loader import load_config
from notification_sdk.config.models import ClientConfig, LoggingConfig
from notification_sdk.domain.enums import NotificationPriority, NotificationType, PlatformType
from notification_sdk.exceptions import NotificationClientError
from notification_sdk.logging import get_logger
from notification_sdk.logging.config import configure_logging

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_CLIENT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def parse_variables(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Turn repeated ``--var key=value`` options into a template variable map."""
    variables: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"Invalid --var '{pair}': expected key=value")
        variables[key.strip()] = value
    return variables


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[ClientConfig, LoggingConfig]:
    """
    Load client settings from a YAML file or, without one, the environment.

    Args:
        config_path: Optional path to a configuration file
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (ClientConfig, LoggingConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if config_path is not None:
        client_config, logging_config = load_config(config_path)
    else:
        client_config = load_environment_config()
        logging_config = LoggingConfig()

    # CLI > environment > config file
    level = log_level_override or os.environ.get("LOG_LEVEL")
    if level:
        try:
            logging_config = LoggingConfig(level=level.upper(), format=logging_config.format)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(
                e,
                message=f"Invalid log level: {level}",
                suggestions=["Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL"],
            ) from e

    return client_config, logging_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notification-sdk",
        description="Send notifications through the notification service",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file (default: NOTIFICATION_* environment variables)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    priorities = [p.value for p in NotificationPriority]

    email = subparsers.add_parser("send-email", help="Send an email")
    email.add_argument("recipient", help="Recipient email address")
    email.add_argument("--subject", required=True)
    email.add_argument("--template", required=True, help="Template ID")
    email.add_argument("--var", action="append", metavar="KEY=VALUE", help="Template variable")
    email.add_argument("--priority", choices=priorities, default=None)
    email.add_argument("--account", default=None, help="Explicit sender account name")
    email.add_argument(
        "--type",
        dest="notification_type",
        choices=[t.value for t in NotificationType],
        default=NotificationType.EMAIL_VERIFICATION.value,
        help="Notification type, selects the sender when --account is not given",
    )

    sms = subparsers.add_parser("send-sms", help="Send an SMS")
    sms.add_argument("phone_number", help="Phone number in international format (+1234567890)")
    sms.add_argument("--template", required=True, help="Template ID")
    sms.add_argument("--var", action="append", metavar="KEY=VALUE", help="Template variable")
    sms.add_argument("--priority", choices=priorities, default=None)

    push = subparsers.add_parser("send-push", help="Send a push notification to a user")
    push.add_argument("user_id")
    push.add_argument("--title", required=True)
    push.add_argument("--body", required=True)
    push.add_argument("--template", required=True, help="Template ID")
    push.add_argument("--var", action="append", metavar="KEY=VALUE", help="Template variable")
    push.add_argument("--image-url", default=None)

    status = subparsers.add_parser("status", help="Show a notification's delivery status")
    status.add_argument("notification_id")

    register = subparsers.add_parser("register-device", help="Register a push device token")
    register.add_argument("user_id")
    register.add_argument("token")
    register.add_argument("device_id")
    register.add_argument("--platform", choices=[p.value for p in PlatformType], required=True)
    register.add_argument("--app-version", default=None)

    unregister = subparsers.add_parser("unregister-device", help="Remove a push device")
    unregister.add_argument("user_id")
    unregister.add_argument("device_id")

    return parser


def run_command(client: NotificationServiceClient, args: argparse.Namespace):
    """Execute the selected subcommand and return the service response, if any."""
    if args.command == "send-email":
        variables = parse_variables(args.var)
        notification_type = NotificationType(args.notification_type)
        if args.account:
            return client.send_email_from(
                args.account,
                args.recipient,
                args.subject,
                args.template,
                variables,
                priority=args.priority,
                notification_type=notification_type,
            )
        return client.send_typed_email(
            notification_type,
            args.recipient,
            args.subject,
            args.template,
            variables,
            priority=args.priority,
        )

    if args.command == "send-sms":
        return client.send_sms(
            args.phone_number, args.template, parse_variables(args.var), priority=args.priority
        )

    if args.command == "send-push":
        return client.send_push_to_user(
            args.user_id,
            args.title,
            args.body,
            args.template,
            parse_variables(args.var),
            image_url=args.image_url,
        )

    if args.command == "status":
        return client.get_status(args.notification_id)

    if args.command == "register-device":
        return client.register_device(
            args.user_id, args.token, args.platform, args.device_id, app_version=args.app_version
        )

    if args.command == "unregister-device":
        client.unregister_device(args.user_id, args.device_id)
        return None

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the notification CLI.

    Returns:
        Exit code (0 for success, 1 for a failed call, 2 for bad configuration).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        client_config, logging_config = load_runtime_config(args.config, args.log_level)

        environment = os.environ.get("ENVIRONMENT", "local")
        configure_logging(
            level=logging_config.level,
            format_type=logging_config.format,
            environment=environment,
        )

        logger.debug(
            "Configuration loaded",
            extra={"event": "config.loaded", "command": args.command, **client_config.redacted()},
        )

        with create_client(config=client_config) as client:
            response = run_command(client, args)

        if response is not None:
            print(json.dumps(response.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
        return EXIT_OK

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except NotificationClientError as e:
        print(f"Error ({e.kind.value}): {e.message}", file=sys.stderr)
        logger.error(
            f"Command failed: {e.message}",
            extra={
                "event": "cli.command.failed",
                "command": args.command,
                "error_type": type(e).__name__,
                "status_code": e.status_code,
            },
        )
        return EXIT_CLIENT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_CLIENT_ERROR


if __name__ == "__main__":
    sys.exit(main())

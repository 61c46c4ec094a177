"""commentguard command line entry point."""

import logging
import sys

import click
from dotenv import load_dotenv

from . import __version__
from .config import ConfigError, load_config, setup_logging
from .content import CommentContent
from .gateway import (
    ABANDONED_MESSAGE,
    ProviderError,
    SpamCheckGateway,
    SpamDetected,
    VerificationFailed,
)
from .logging_format import console

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_SPAM = 2


def build_gateway() -> SpamCheckGateway:
    """Load configuration and build a gateway, exiting on config errors."""
    # Load .env file if present
    load_dotenv()

    try:
        config = load_config()
    except ConfigError as e:
        console.error(f"Configuration error: {e}")
        sys.exit(EXIT_ERROR)

    setup_logging(config.log_level, config.log_dir, config.log_retention_days)

    client = config.create_client()
    click.get_current_context().call_on_close(client.close)

    # Every command verifies the key itself, skip the startup check
    return SpamCheckGateway(
        client,
        strict=config.akismet.strict,
        verify_on_start=False,
    )


def content_options(func):
    """Attach the comment content options to a command."""
    options = [
        click.option("--ip", "user_ip", required=True, help="Commenter IP address"),
        click.option("--user-agent", default="", help="Commenter user agent"),
        click.option("--referrer", default="", help="HTTP referrer"),
        click.option("--author", default=None, help="Comment author name"),
        click.option("--email", default=None, help="Comment author email"),
        click.option("--url", default=None, help="Comment author URL"),
        click.option("--content", default=None, help="Comment body"),
        click.option("--test", "is_test", is_flag=True, help="Mark as a test request"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _content(user_ip, user_agent, referrer, author, email, url, content, is_test):
    return CommentContent(
        user_ip=user_ip,
        user_agent=user_agent,
        referrer=referrer,
        comment_author=author,
        comment_author_email=email,
        comment_author_url=url,
        comment_content=content,
        is_test=is_test,
    )


def _run_action(action: str, operation, comment: CommentContent) -> int:
    """Run a gateway operation and print the outcome."""
    console.request_header(action, comment.user_ip, comment.comment_author)
    if comment.is_test:
        console.status("Test request, Akismet will not learn from it")
    try:
        result = operation(comment)
    except SpamDetected:
        console.result_box("SPAM", False)
        return EXIT_SPAM
    except (ProviderError, VerificationFailed) as e:
        console.result_box("FAILED", False, str(e))
        return EXIT_ERROR

    if result == ABANDONED_MESSAGE:
        console.result_box("ABANDONED", False, ABANDONED_MESSAGE)
        return EXIT_ERROR

    console.result_box("HAM" if action == "check" else "SUBMITTED", True)
    return EXIT_OK


@click.group()
@click.version_option(version=__version__)
def cli():
    """Akismet spam-check gateway."""
    pass


@cli.command()
def verify():
    """Verify the configured Akismet key."""
    gateway = build_gateway()
    try:
        gateway.verify()
    except VerificationFailed as e:
        console.error(f"Akismet key rejected: {e}")
        sys.exit(EXIT_ERROR)
    console.info("Akismet key is valid")


@cli.command()
@content_options
def check(**options):
    """Check a comment for spam."""
    gateway = build_gateway()
    sys.exit(_run_action("check", gateway.check_spam, _content(**options)))


@cli.command("submit-spam")
@content_options
def submit_spam(**options):
    """Report a comment Akismet missed as spam."""
    gateway = build_gateway()
    sys.exit(_run_action("submit-spam", gateway.submit_spam, _content(**options)))


@cli.command("submit-ham")
@content_options
def submit_ham(**options):
    """Report a comment wrongly flagged as spam."""
    gateway = build_gateway()
    sys.exit(_run_action("submit-ham", gateway.submit_ham, _content(**options)))


if __name__ == "__main__":
    cli()

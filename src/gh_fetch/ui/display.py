"""User-facing console output.

Note:
    These functions use print() for direct console output so that
    messages are always visible regardless of logger configuration.
"""
# ruff: noqa: T201

from gh_fetch.domain.types import DeviceAuthorizationSession


def print_device_instructions(session: DeviceAuthorizationSession) -> None:
    """Show the device login code and where to enter it.

    Args:
        session: Device authorization session in progress.

    """
    print()
    print(f"🔑 Open {session.verification_uri} in a browser")
    print(f"   and enter the code: {session.user_code}")
    if session.expires_in:
        minutes = max(1, session.expires_in // 60)
        print(f"   The code expires in about {minutes} minutes.")
    print("Waiting for authorization...", flush=True)


def print_info_message(message: str) -> None:
    """Print an informational message with icon."""
    print(f"ℹ️  {message}")  # noqa: RUF001


def print_success_message(message: str) -> None:
    """Print a success message with icon."""
    print(f"✅ {message}")


def print_error_message(message: str) -> None:
    """Print an error message with icon."""
    print(f"❌ {message}")


def print_warning_message(message: str) -> None:
    """Print a warning message with icon."""
    print(f"⚠️  {message}")

"""End-to-end scenario demonstrating the Python client API."""

from __future__ import annotations

import os
import sys

from gocd_client import ConfigurationError, GoCDClient, GoCDError, StatusError

PACKAGE_ID = os.getenv("GOCD_DEMO_PACKAGE_ID")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def toggle_auto_update(client: GoCDClient, package_id: str) -> None:
    tagged = client.get_package_with_etag(package_id)
    package = tagged.value
    print(f"Package {package.id} auto_update={package.auto_update} etag={tagged.etag}")

    changed = package.model_copy(update={"auto_update": not package.auto_update})
    try:
        updated = client.update_package(changed, tagged.etag)
    except StatusError as exc:
        if exc.status_code == 412:
            print("Package changed on the server since it was fetched; fetch it again and retry.")
            return
        raise
    print(f"Updated {updated.id}: auto_update={updated.auto_update}")


def main() -> int:
    try:
        client = GoCDClient.from_env()
    except ConfigurationError as exc:
        print(f"missing configuration: {exc}")
        return 1

    with client:
        try:
            log_section("Server")
            version = client.get_version()
            current_user = client.get_current_user()
            print(f"I am {current_user.display_name}, GoCD version: {version.version}")

            log_section("Packages")
            for package in client.get_all_packages().packages:
                print(f"- {package.id} ({package.package_repo.name})")

            if PACKAGE_ID:
                log_section(f"Update {PACKAGE_ID}")
                toggle_auto_update(client, PACKAGE_ID)
        except GoCDError as exc:
            print(f"request failed: {exc}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

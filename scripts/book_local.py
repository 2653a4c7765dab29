#!/usr/bin/env python3
"""
Interactive local booking harness.

Usage:
  USE_DEV_BACKEND=true python3 scripts/book_local.py

What it does:
- Loads services and artists through the same wiring the views use
- Walks through the booking form one field at a time
- Submits the draft and prints the notices and the resulting appointment
"""

from __future__ import annotations

import asyncio
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salon.application.use_cases.booking import BookingSubmissionPipeline  # noqa: E402
from salon.core.logging import configure_logging  # noqa: E402
from salon.wiring.dependencies import get_appointment_manager, get_booking_pipeline, get_notifier  # noqa: E402


def _print_header(pipeline: BookingSubmissionPipeline) -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print(f"locale: {pipeline.locale.value}")
    print("Leave a field empty to skip it. Commands: /quit")
    print("-" * 60)


def _choose(label: str, options: list[tuple[str, str]]) -> str | None:
    print(f"\n{label}:")
    for index, (_, text) in enumerate(options, start=1):
        print(f"  {index}. {text}")
    raw = input("> ").strip()
    if raw == "/quit":
        return None
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return options[int(raw) - 1][0]
    return ""


async def main() -> None:
    configure_logging()
    pipeline = get_booking_pipeline()
    notifier = get_notifier()
    _print_header(pipeline)

    await pipeline.load_catalog()

    service_id = _choose("Service", pipeline.service_options())
    if service_id is None:
        return
    pipeline.update_field("service_id", service_id)

    artist_id = _choose("Artist", pipeline.artist_options())
    if artist_id is None:
        return
    pipeline.update_field("artist_id", artist_id)

    raw_date = input("\nDate (YYYY-MM-DD)> ").strip()
    if raw_date:
        try:
            if not pipeline.select_date(date.fromisoformat(raw_date)):
                print("That date is in the past.")
        except ValueError:
            print("Not a date, skipped.")

    slot = _choose("Time", [(s, s) for s in pipeline.time_slots])
    if slot is None:
        return
    pipeline.update_field("appointment_time", slot)

    for field in ("customer_name", "customer_email", "customer_phone", "notes"):
        pipeline.update_field(field, input(f"{field}> ").strip())

    result = await pipeline.submit()

    print("\n--- Notices ---")
    for notice in notifier.notices:
        print(f"{notice.level}: {notice.text}")

    print("\n--- Result ---")
    print(f"phase: {pipeline.phase.value}")
    if result.validation is not None and not result.validation.is_valid:
        print(f"missing: {', '.join(result.validation.missing_fields) or '-'}")
        print(f"failures: {', '.join(f.value for f in result.validation.failures)}")
    if result.appointment is not None:
        print(f"appointment: {result.appointment.id} ({result.appointment.status.value})")

        manager = get_appointment_manager(is_authenticated=lambda: True)
        await manager.load_appointments()
        print(f"appointments on file: {len(manager.appointments)}")
    print("-" * 60)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")

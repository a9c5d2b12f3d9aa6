"""CLI commands for service appointments and the scheduling draft."""

from __future__ import annotations

from datetime import date, datetime

import click

from techstore.application.cancel_appointment import CancelAppointmentHandler
from techstore.application.edit_draft import EditDraftHandler
from techstore.application.schedule_appointment import ScheduleAppointmentHandler
from techstore.application.show_appointments import ShowAppointmentsHandler
from techstore.domain.exceptions import DomainException
from techstore.domain.model.appointment import (
    AppointmentDraft,
    EquipmentType,
    issues_for,
    min_date,
    time_slots,
)
from techstore.infrastructure.bootstrap import (
    appointment_ids,
    appointment_repository,
    draft_repository,
)


def _display_draft(draft: AppointmentDraft) -> None:
    click.echo(f"Type:    {draft.equipment.value}")
    click.echo(f"Issue:   {draft.issue}")
    click.echo(f"Name:    {draft.name}")
    click.echo(f"E-mail:  {draft.email}")
    click.echo(f"Phone:   {draft.phone}")
    click.echo(f"Date:    {draft.date}")
    click.echo(f"Time:    {draft.time}")
    if draft.details:
        click.echo(f"Details: {draft.details}")
    if draft.missing_fields:
        click.echo(f"Missing: {', '.join(draft.missing_fields)}")


def _check_not_past(ctx: click.Context, param: click.Parameter, value: datetime | None) -> str | None:
    """The date picker only offers today onwards."""
    if value is None:
        return None
    earliest = min_date(date.today())
    chosen = value.date().isoformat()
    if chosen < earliest:
        raise click.BadParameter(f"must be {earliest} or later")
    return chosen


@click.command("slots")
def schedule_slots() -> None:
    """List bookable time slots."""
    for slot in time_slots():
        click.echo(slot)


@click.command("issues")
@click.option(
    "--type", "equipment",
    type=click.Choice([e.value for e in EquipmentType]),
    required=True,
    help="Equipment type.",
)
def schedule_issues(equipment: str) -> None:
    """List the common issues for an equipment type."""
    for issue in issues_for(equipment):
        click.echo(issue)


@click.command("draft")
def schedule_draft() -> None:
    """Show the in-progress scheduling form."""
    _display_draft(EditDraftHandler(draft_repo=draft_repository()).current())


@click.command("set")
@click.option("--type", "equipment", type=click.Choice([e.value for e in EquipmentType]), help="Equipment type.")
@click.option("--issue", help="Issue (one of 'schedule issues' or free text).")
@click.option("--name", help="Contact name.")
@click.option("--email", help="Contact e-mail.")
@click.option("--phone", help="Contact phone.")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), callback=_check_not_past, help="Date (YYYY-MM-DD).")
@click.option("--time", "slot", type=click.Choice(list(time_slots())), help="Time slot (see 'schedule slots').")
@click.option("--details", help="Optional details.")
def schedule_set(**options: str | None) -> None:
    """Fill in fields of the scheduling form."""
    renames = {"day": "date", "slot": "time"}
    changes = {
        renames.get(key, key): value
        for key, value in options.items()
        if value is not None
    }

    try:
        draft = EditDraftHandler(draft_repo=draft_repository()).handle(**changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_draft(draft)


@click.command("reset")
def schedule_reset() -> None:
    """Start the scheduling form over."""
    _display_draft(EditDraftHandler(draft_repo=draft_repository()).reset())


@click.command("create")
def schedule_create() -> None:
    """Book an appointment from the scheduling form."""
    draft = draft_repository().get()
    handler = ScheduleAppointmentHandler(
        appointment_repo=appointment_repository(),
        draft_repo=draft_repository(),
        next_id=appointment_ids(),
    )

    if not handler.can_submit(draft):
        raise click.ClickException(
            "Cannot schedule yet, missing: " + ", ".join(draft.missing_fields)
        )

    try:
        result = handler.handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.notice.title)
    click.echo(result.notice.description)
    click.echo(f"Id: {result.appointment.id}")


@click.command("list")
def schedule_list() -> None:
    """List booked appointments, most recent first."""
    appointments = ShowAppointmentsHandler(appointment_repo=appointment_repository()).handle()

    if not appointments:
        click.echo("Nenhum agendamento ainda.")
        return

    for a in appointments:
        click.echo(f"{a.id}  {a.name} • {a.equipment.upper()}")
        click.echo(f"    {a.issue} • {a.date} às {a.time} • {a.email} • {a.phone}")
        if a.details:
            click.echo(f"    {a.details}")


@click.command("cancel")
@click.option("--id", "appointment_id", required=True, help="Appointment ID to cancel.")
def schedule_cancel(appointment_id: str) -> None:
    """Cancel an appointment."""
    CancelAppointmentHandler(appointment_repo=appointment_repository()).handle(appointment_id)
    click.echo(f"Appointment {appointment_id} cancelled.")

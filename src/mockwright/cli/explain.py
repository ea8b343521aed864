"""Commands explaining how unmatched invocations are resolved."""

import click

from mockwright.behavior import MockBehavior
from mockwright.dispatch import plan_unmatched
from mockwright.invocation import DeclaringCapability, MethodInvocation, ReturnKind

BEHAVIORS = [behavior.value for behavior in MockBehavior]
RETURN_KINDS = [kind.value for kind in ReturnKind]

# (label, declared on interface, abstract, identity member)
MEMBER_SHAPES = [
    ("interface", True, False, False),
    ("abstract", False, True, False),
    ("concrete", False, False, False),
    ("identity", False, False, True),
]


def _invocation(
    interface: bool, abstract: bool, identity_member: bool, returns: str
) -> MethodInvocation:
    return MethodInvocation(
        "member",
        declaring_capability=(
            DeclaringCapability.INTERFACE if interface else DeclaringCapability.CONCRETE
        ),
        is_abstract_member=abstract,
        return_kind=ReturnKind(returns),
        is_object_identity_member=identity_member,
    )


@click.command()
@click.option(
    "--behavior",
    "-b",
    type=click.Choice(BEHAVIORS, case_sensitive=False),
    required=True,
    help="Behavior of the mock receiving the call.",
)
@click.option(
    "--interface/--concrete",
    default=False,
    help="Whether the member is declared on an interface.",
)
@click.option("--abstract", is_flag=True, help="The member has no default body.")
@click.option(
    "--identity-member",
    is_flag=True,
    help="The member is an equality, hash or string-form operation.",
)
@click.option(
    "--returns",
    type=click.Choice(RETURN_KINDS),
    default=ReturnKind.VOID.value,
    show_default=True,
    help="Return kind of the member.",
)
def explain(
    behavior: str, interface: bool, abstract: bool, identity_member: bool, returns: str
) -> None:
    """Show what happens to an unmatched call with the given shape."""
    invocation = _invocation(interface, abstract, identity_member, returns)
    click.echo(str(plan_unmatched(MockBehavior(behavior), invocation)))


@click.command()
@click.option(
    "--returns",
    type=click.Choice(RETURN_KINDS),
    default=ReturnKind.VOID.value,
    show_default=True,
    help="Return kind of the members in the table.",
)
def matrix(returns: str) -> None:
    """Show unmatched-call outcomes for every behavior and member shape."""
    rows = [["member", *BEHAVIORS]]
    for label, interface, abstract, identity_member in MEMBER_SHAPES:
        invocation = _invocation(interface, abstract, identity_member, returns)
        rows.append(
            [label]
            + [str(plan_unmatched(MockBehavior(b), invocation)) for b in BEHAVIORS]
        )

    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    click.echo(f"Unmatched calls returning {returns}:")
    for row in rows:
        click.echo("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())

"""Command-line entrypoints for SciVerse."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import asdict
from typing import Annotated, Any, Dict, Iterator, List

import typer

from sciverse.balancer import balance_equation
from sciverse.calculators import (
    acidity_profile,
    combined_gas,
    dilution,
    empirical_formula,
    first_order,
    half_life,
    ideal_gas,
    molality,
    molarity,
    mole_conversions,
)
from sciverse.errors import SciVerseError
from sciverse.formula import format_formula, parse_formula
from sciverse.mass import formula_mass
from sciverse.models import CalculatedValue, Unit
from sciverse.stoichiometry import calculate_stoichiometry
from sciverse.validation import format_amount

app = typer.Typer(add_completion=False, help="SciVerse chemistry calculators.")

JsonOption = Annotated[bool, typer.Option("--json", help="Print a JSON payload.")]


@contextmanager
def _user_errors() -> Iterator[None]:
    try:
        yield
    except SciVerseError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _emit(payload: Dict[str, Any], text: str, as_json: bool) -> None:
    typer.echo(json.dumps(payload, indent=2) if as_json else text)


def _emit_value(result: CalculatedValue, as_json: bool) -> None:
    _emit(
        asdict(result),
        f"{result.name}: {format_amount(result.value)} {result.unit}".rstrip(),
        as_json,
    )


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("molar-mass")
def molar_mass_command(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. Ca(OH)2.")],
    as_json: JsonOption = False,
) -> None:
    """Calculate the molar mass of a formula."""
    with _user_errors():
        mass = formula_mass(formula)
    _emit({"formula": formula, "molar_mass": mass}, f"{format_amount(mass, 4)} g/mol", as_json)


@app.command("parse")
def parse_command(
    formula: Annotated[str, typer.Argument(help="Chemical formula.")],
    as_json: JsonOption = False,
) -> None:
    """Show the element counts of a formula."""
    with _user_errors():
        counts = dict(parse_formula(formula))
    lines = [f"{element}: {count}" for element, count in counts.items()]
    _emit(
        {"formula": formula, "hill": format_formula(counts), "elements": counts},
        "\n".join([format_formula(counts)] + lines),
        as_json,
    )


@app.command("balance")
def balance_command(
    equation: Annotated[str, typer.Argument(help="Equation such as 'H2 + O2 -> H2O'.")],
    as_json: JsonOption = False,
) -> None:
    """Balance a chemical equation."""
    with _user_errors():
        balanced = balance_equation(equation)
    _emit({"equation": equation, "balanced": balanced}, balanced, as_json)


@app.command("stoich")
def stoich_command(
    equation: Annotated[str, typer.Argument(help="Equation such as '2H2 + O2 -> 2H2O'.")],
    known: Annotated[str, typer.Option(help="Formula of the known substance.")],
    amount: Annotated[float, typer.Option(help="Amount of the known substance.")],
    target: Annotated[str, typer.Option(help="Formula of the substance to solve for.")],
    unit: Annotated[Unit, typer.Option(help="Unit of the known amount.")] = Unit.GRAMS,
    desired_unit: Annotated[Unit, typer.Option(help="Unit of the result.")] = Unit.GRAMS,
    balance: Annotated[
        bool, typer.Option("--balance/--no-balance", help="Balance the equation first.")
    ] = True,
    as_json: JsonOption = False,
) -> None:
    """Solve a mole-ratio stoichiometry problem."""
    with _user_errors():
        result = calculate_stoichiometry(equation, known, amount, unit, target, desired_unit, balance=balance)
    _emit(
        {
            "equation": result.equation,
            "target": result.target,
            "value": result.quantity.value,
            "unit": result.quantity.unit.value,
        },
        f"{result.equation}\n{result.describe()}",
        as_json,
    )


@app.command("moles")
def moles_command(
    formula: Annotated[str, typer.Argument(help="Chemical formula.")],
    mass: Annotated[float | None, typer.Option(help="Mass (g).")] = None,
    moles: Annotated[float | None, typer.Option(help="Amount (mol).")] = None,
    particles: Annotated[float | None, typer.Option(help="Number of particles.")] = None,
    volume: Annotated[float | None, typer.Option(help="Gas volume at STP (L).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Convert between mass, moles, particles and gas volume."""
    with _user_errors():
        result = mole_conversions(formula, mass=mass, moles=moles, particles=particles, volume=volume)
    text = "\n".join(
        [
            f"Molar mass: {format_amount(result.molar_mass, 4)} g/mol",
            f"Moles: {format_amount(result.moles)} mol",
            f"Mass: {format_amount(result.mass)} g",
            f"Particles: {result.particles:.4e}",
            f"Volume (STP): {format_amount(result.volume)} L",
        ]
    )
    _emit(asdict(result), text, as_json)


@app.command("molarity")
def molarity_command(
    volume: Annotated[float, typer.Option(help="Solution volume (L).")],
    moles: Annotated[float | None, typer.Option(help="Solute amount (mol).")] = None,
    mass: Annotated[float | None, typer.Option(help="Solute mass (g).")] = None,
    formula: Annotated[str | None, typer.Option(help="Solute formula, required with --mass.")] = None,
    as_json: JsonOption = False,
) -> None:
    """Molarity of a solution."""
    with _user_errors():
        result = molarity(volume, moles=moles, mass=mass, formula=formula)
    _emit_value(result, as_json)


@app.command("molality")
def molality_command(
    solvent_kg: Annotated[float, typer.Option(help="Solvent mass (kg).")],
    moles: Annotated[float | None, typer.Option(help="Solute amount (mol).")] = None,
    mass: Annotated[float | None, typer.Option(help="Solute mass (g).")] = None,
    formula: Annotated[str | None, typer.Option(help="Solute formula, required with --mass.")] = None,
    as_json: JsonOption = False,
) -> None:
    """Molality of a solution."""
    with _user_errors():
        result = molality(solvent_kg, moles=moles, mass=mass, formula=formula)
    _emit_value(result, as_json)


@app.command("dilution")
def dilution_command(
    m1: Annotated[float | None, typer.Option(help="Initial molarity (mol/L).")] = None,
    v1: Annotated[float | None, typer.Option(help="Initial volume (L).")] = None,
    m2: Annotated[float | None, typer.Option(help="Final molarity (mol/L).")] = None,
    v2: Annotated[float | None, typer.Option(help="Final volume (L).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Solve M1·V1 = M2·V2; omit the value to solve for."""
    with _user_errors():
        result = dilution(m1, v1, m2, v2)
    _emit_value(result, as_json)


@app.command("ideal-gas")
def ideal_gas_command(
    pressure: Annotated[float | None, typer.Option(help="Pressure (atm).")] = None,
    volume: Annotated[float | None, typer.Option(help="Volume (L).")] = None,
    moles: Annotated[float | None, typer.Option(help="Amount (mol).")] = None,
    temperature: Annotated[float | None, typer.Option(help="Temperature (K).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Solve PV = nRT; omit the value to solve for."""
    with _user_errors():
        result = ideal_gas(pressure, volume, moles, temperature)
    _emit_value(result, as_json)


@app.command("combined-gas")
def combined_gas_command(
    p1: Annotated[float | None, typer.Option(help="Initial pressure.")] = None,
    v1: Annotated[float | None, typer.Option(help="Initial volume.")] = None,
    t1: Annotated[float | None, typer.Option(help="Initial temperature (K).")] = None,
    p2: Annotated[float | None, typer.Option(help="Final pressure.")] = None,
    v2: Annotated[float | None, typer.Option(help="Final volume.")] = None,
    t2: Annotated[float | None, typer.Option(help="Final temperature (K).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Solve P1·V1/T1 = P2·V2/T2; omit the value to solve for."""
    with _user_errors():
        result = combined_gas(p1, v1, t1, p2, v2, t2)
    _emit_value(result, as_json)


@app.command("ph")
def ph_command(
    value: Annotated[float, typer.Argument(help="Known value.")],
    kind: Annotated[str, typer.Option(help="One of pH, pOH, H+, OH-.")] = "pH",
    as_json: JsonOption = False,
) -> None:
    """Derive pH, pOH, [H+] and [OH-] from one of them."""
    with _user_errors():
        profile = acidity_profile(value, kind)
    text = "\n".join(
        [
            f"pH: {profile.ph:.2f}",
            f"pOH: {profile.poh:.2f}",
            f"[H+]: {profile.hydronium:.3e} mol/L",
            f"[OH-]: {profile.hydroxide:.3e} mol/L",
        ]
    )
    _emit(asdict(profile), text, as_json)


def _parse_percentages(items: List[str]) -> Dict[str, float]:
    percentages: Dict[str, float] = {}
    for item in items:
        symbol, sep, value = item.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected SYMBOL=PERCENT, got {item!r}")
        try:
            percentages[symbol.strip()] = float(value)
        except ValueError:
            raise typer.BadParameter(f"Percentage for {symbol} is not a number: {value!r}") from None
    return percentages


@app.command("empirical")
def empirical_command(
    composition: Annotated[List[str], typer.Argument(help="Mass percents as SYMBOL=PERCENT, e.g. C=40.0.")],
    molecular_mass: Annotated[float | None, typer.Option(help="Molar mass of the compound (g/mol).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Empirical (and molecular) formula from percent composition."""
    percentages = _parse_percentages(composition)
    with _user_errors():
        result = empirical_formula(percentages, molecular_mass)
    lines = [f"Empirical formula: {result.empirical} ({format_amount(result.empirical_mass, 4)} g/mol)"]
    if result.molecular:
        lines.append(f"Molecular formula: {result.molecular} (n = {result.multiplier})")
    elif molecular_mass is not None:
        lines.append("Molecular mass is not a likely multiple of the empirical formula mass.")
    _emit(asdict(result), "\n".join(lines), as_json)


@app.command("first-order")
def first_order_command(
    initial: Annotated[float | None, typer.Option(help="Initial concentration [A]0 (mol/L).")] = None,
    remaining: Annotated[float | None, typer.Option(help="Concentration [A]t (mol/L).")] = None,
    rate_constant: Annotated[float | None, typer.Option(help="Rate constant k (1/s).")] = None,
    time: Annotated[float | None, typer.Option(help="Time t (s).")] = None,
    as_json: JsonOption = False,
) -> None:
    """Solve the first-order rate law; omit the value to solve for."""
    with _user_errors():
        result = first_order(initial, remaining, rate_constant, time)
        k = result.value if result.unit == "1/s" else rate_constant
        t_half = half_life(k)
    payload = asdict(result)
    payload["half_life"] = t_half.value
    text = "\n".join(
        [
            f"{result.name}: {format_amount(result.value)} {result.unit}",
            f"{t_half.name}: {format_amount(t_half.value)} {t_half.unit}",
        ]
    )
    _emit(payload, text, as_json)


@app.command("gui")
def gui_command() -> None:
    """Launch the desktop calculator window."""
    from sciverse.gui.app import main as gui_main

    gui_main()

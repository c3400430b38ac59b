"""GUI package for SciVerse."""

from sciverse.gui.forms import FormState, Status, acidity_form, molar_mass_form, stoichiometry_form

__all__ = ["FormState", "Status", "acidity_form", "molar_mass_form", "stoichiometry_form"]

"""Qt application entrypoint for the SciVerse GUI."""

from __future__ import annotations

import logging
import sys

from PySide6 import QtCore, QtWidgets

from sciverse.calculators.acidity import INPUT_KINDS
from sciverse.gui.forms import FormState, Status, acidity_form, molar_mass_form, stoichiometry_form
from sciverse.models import Unit


class CalculatorTab(QtWidgets.QWidget):
    """Form with a calculate button and a status/result area."""

    button_text = "Calculate"

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.form_layout = QtWidgets.QFormLayout(self)
        self.form_layout.setLabelAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.build_inputs()

        self.run_button = QtWidgets.QPushButton(self.button_text)
        self.run_button.clicked.connect(self._run)
        self.form_layout.addRow(self.run_button)

        self.output = QtWidgets.QLabel()
        self.output.setWordWrap(True)
        self.output.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)
        self.form_layout.addRow(self.output)
        self.show_state(FormState())

    def build_inputs(self) -> None:
        """Add the tab's input rows. Subclasses must override this."""
        raise NotImplementedError

    def calculate(self) -> FormState:
        """Run the tab's calculation on the current inputs. Subclasses must override this."""
        raise NotImplementedError

    def _line(self, label: str, placeholder: str) -> QtWidgets.QLineEdit:
        edit = QtWidgets.QLineEdit()
        edit.setPlaceholderText(placeholder)
        edit.returnPressed.connect(self._run)
        self.form_layout.addRow(label, edit)
        return edit

    def _choice(self, label: str, options) -> QtWidgets.QComboBox:
        combo = QtWidgets.QComboBox()
        combo.addItems(list(options))
        self.form_layout.addRow(label, combo)
        return combo

    def show_state(self, state: FormState) -> None:
        self.run_button.setEnabled(state.status is not Status.LOADING)
        if state.status is Status.LOADING:
            self.output.setStyleSheet("")
            self.output.setText("Calculating...")
        elif state.error:
            self.output.setStyleSheet("color: #b00020;")
            self.output.setText(state.error)
        else:
            self.output.setStyleSheet("")
            self.output.setText(state.result or "")

    def _run(self) -> None:
        self.show_state(FormState.loading())
        QtWidgets.QApplication.processEvents()
        self.show_state(self.calculate())


class MolarMassTab(CalculatorTab):
    def build_inputs(self) -> None:
        self.formula = self._line("Formula", "e.g. Ca(OH)2")

    def calculate(self) -> FormState:
        return molar_mass_form(self.formula.text())


class StoichiometryTab(CalculatorTab):
    def build_inputs(self) -> None:
        units = [unit.value for unit in Unit]
        self.equation = self._line("Equation", "e.g. H2 + O2 -> H2O")
        self.known = self._line("Known substance", "e.g. H2")
        self.amount = self._line("Amount", "e.g. 4")
        self.unit = self._choice("Unit", units)
        self.target = self._line("Find substance", "e.g. H2O")
        self.desired_unit = self._choice("Result unit", units)

    def calculate(self) -> FormState:
        return stoichiometry_form(
            self.equation.text(),
            self.known.text(),
            self.amount.text(),
            self.unit.currentText(),
            self.target.text(),
            self.desired_unit.currentText(),
        )


class AcidityTab(CalculatorTab):
    def build_inputs(self) -> None:
        self.kind = self._choice("Known value", INPUT_KINDS)
        self.value = self._line("Value", "e.g. 7")

    def calculate(self) -> FormState:
        return acidity_form(self.value.text(), self.kind.currentText())


class SciVerseWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("SciVerse Chemistry")
        self.resize(640, 420)

        tabs = QtWidgets.QTabWidget()
        tabs.addTab(MolarMassTab(), "Molar Mass")
        tabs.addTab(StoichiometryTab(), "Stoichiometry")
        tabs.addTab(AcidityTab(), "pH / pOH")
        self.setCentralWidget(tabs)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = SciVerseWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

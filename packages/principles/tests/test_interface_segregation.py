from __future__ import annotations

import pytest

from solid_core.primitives.exceptions import AbstractInstantiationError
from solid_principles.interface_segregation import (
    Document,
    Fax,
    Machine,
    MultiFunctionPrinter,
    OldFashionedPrinter,
    PhotoCopier,
    Printer,
    Scanner,
    SimplePrinter,
    main,
)


@pytest.fixture
def doc() -> Document:
    return Document(title="invoice")


@pytest.mark.parametrize("abstraction", [Machine, Printer, Scanner, Fax])
def test_capabilities_cannot_be_instantiated(abstraction):
    with pytest.raises(AbstractInstantiationError, match=abstraction.__name__):
        abstraction()


def test_partially_implemented_device_is_rejected():
    class Laminator(Machine):
        def print(self, document: Document) -> str:
            return "laminating"

    with pytest.raises(AbstractInstantiationError) as exc:
        Laminator()
    assert exc.value.missing == ["fax", "scan"]


def test_multi_function_printer(doc: Document):
    mfp = MultiFunctionPrinter()
    assert mfp.print(doc) == "Printing invoice"
    assert mfp.fax(doc) == "Faxing invoice"
    assert mfp.scan(doc) == "Scanning invoice"


def test_old_fashioned_printer_cannot_fax_or_scan(doc: Document):
    printer = OldFashionedPrinter()
    assert printer.print(doc) == "Printing invoice"
    with pytest.raises(NotImplementedError, match="OldFashionedPrinter.scan"):
        printer.scan(doc)
    with pytest.raises(NotImplementedError, match="OldFashionedPrinter.fax"):
        printer.fax(doc)


def test_segregated_devices_declare_only_what_they_do(doc: Document):
    copier = PhotoCopier()
    assert isinstance(copier, Printer)
    assert isinstance(copier, Scanner)
    assert not isinstance(copier, Fax)
    assert copier.scan(doc) == "Scanning invoice"

    printer = SimplePrinter()
    assert printer.print(doc) == "Printing invoice"
    assert not isinstance(printer, Scanner)


def test_main(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "Fat interface:",
        "* Printing quarterly report",
        "* OldFashionedPrinter.scan is not implemented!",
        "Segregated interfaces:",
        "* SimplePrinter can print",
        "* PhotoCopier can print, scan",
    ]

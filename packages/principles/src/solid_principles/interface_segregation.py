#!/usr/bin/env python
"""Interface segregation principle: office machines.

Split interfaces so implementers don't carry operations they can't
perform. ``Machine`` forces ``OldFashionedPrinter`` to stub out fax and
scan; the segregated ``Printer`` / ``Scanner`` / ``Fax`` capabilities let
each device declare exactly what it does.
"""

from __future__ import annotations

import logging
from abc import abstractmethod

from solid_core.domain.capability import Capability
from solid_core.domain.value_object import ValueObject

logger = logging.getLogger("solid.principles.interface_segregation")


class Document(ValueObject):
    title: str


# ─── Fat interface ────────────────────────────────────────────────


class Machine(Capability):
    @abstractmethod
    def print(self, document: Document) -> str: ...

    @abstractmethod
    def fax(self, document: Document) -> str: ...

    @abstractmethod
    def scan(self, document: Document) -> str: ...


class MultiFunctionPrinter(Machine):
    def print(self, document: Document) -> str:
        return f"Printing {document.title}"

    def fax(self, document: Document) -> str:
        return f"Faxing {document.title}"

    def scan(self, document: Document) -> str:
        return f"Scanning {document.title}"


class OldFashionedPrinter(Machine):
    """Can only print; the rest of ``Machine`` is dead weight."""

    def print(self, document: Document) -> str:
        return f"Printing {document.title}"

    def fax(self, document: Document) -> str:
        raise NotImplementedError("OldFashionedPrinter.fax is not implemented!")

    def scan(self, document: Document) -> str:
        raise NotImplementedError("OldFashionedPrinter.scan is not implemented!")


# ─── Segregated capabilities ──────────────────────────────────────


class Printer(Capability):
    @abstractmethod
    def print(self, document: Document) -> str: ...


class Scanner(Capability):
    @abstractmethod
    def scan(self, document: Document) -> str: ...


class Fax(Capability):
    @abstractmethod
    def fax(self, document: Document) -> str: ...


class SimplePrinter(Printer):
    def print(self, document: Document) -> str:
        return f"Printing {document.title}"


class PhotoCopier(Printer, Scanner):
    def print(self, document: Document) -> str:
        return f"Printing {document.title}"

    def scan(self, document: Document) -> str:
        return f"Scanning {document.title}"


# ─── Demo ─────────────────────────────────────────────────────────


def main() -> None:
    doc = Document(title="quarterly report")

    print("Fat interface:")
    old = OldFashionedPrinter()
    print(f"* {old.print(doc)}")
    try:
        old.scan(doc)
    except NotImplementedError as exc:
        logger.debug("Expected failure from the fat interface", exc_info=True)
        print(f"* {exc}")

    print("Segregated interfaces:")
    for device in (SimplePrinter(), PhotoCopier()):
        capabilities = [
            name
            for name, capability in (
                ("print", Printer),
                ("scan", Scanner),
                ("fax", Fax),
            )
            if isinstance(device, capability)
        ]
        print(f"* {type(device).__name__} can {', '.join(capabilities)}")


if __name__ == "__main__":
    main()

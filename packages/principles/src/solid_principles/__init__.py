"""solid-principles: one runnable demonstration per design principle.

- :mod:`.open_closed`: product filtering with specifications
- :mod:`.dependency_inversion`: relationships behind a browser abstraction
- :mod:`.interface_segregation`: segregated printer / scanner / fax
"""

from .library import ANTOINE_DATA, compound_library, comp_library, data, compound

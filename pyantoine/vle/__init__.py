from .vle import VLE_Result, vle_pressure, vle_temperature, common_range

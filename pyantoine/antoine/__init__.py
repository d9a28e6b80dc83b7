from .antoine import Antoine, AntoineInterval, antoine_psat, antoine_tsat, build, build_from_si

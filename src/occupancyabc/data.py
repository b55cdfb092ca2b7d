import numpy as np

# Twenty yearly surveys of a single site, True where the species was seen.
OBSERVED_PRESENCE = np.array(
    [False, False, False, True, True, True, True, True, True, True,
     True, True, False, True, True, False, True, True, True, True],
    dtype=np.bool_,
)
OBSERVED_PRESENCE.flags.writeable = False

from argparse import Namespace

constants = Namespace()

# Mass Rendering Constants
constants.ROUNDED_MASS_DECIMALS = 6
constants.TOOLTIP_MASS_DECIMALS = 4

# Catalog Constants
constants.SINGLE_AA_SUFFIX = "-1"

# Pattern Comparison Constants
constants.DEFAULT_SEQUENCE_MATCHING = "string"

"""
landstrata: land-use stratified sampling designs for forest inventories

Groups inventory plots into one stratum per land use, validates the
per-stratum design, computes Horvitz-Thompson inclusion probabilities
and assembles stratified point estimators for the whole population or
for a subdomain of land uses.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

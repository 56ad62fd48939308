# ====================================================================================== #
# Shared imports and constants for walking through UCDP data.
# ====================================================================================== #
import numpy as np
import pandas as pd
import os
from warnings import warn

# try to find data directory either in cwd or above unless it has been set explicitly
if 'UCDPWALK_DATADR' in os.environ:
    DATADR = os.environ['UCDPWALK_DATADR']
elif os.path.isdir(os.getcwd()+'/../data'):
    DATADR = os.getcwd()+'/../data'
else:
    DATADR = os.getcwd()+'/data'

UCDP_VERSION = os.environ.get('UCDPWALK_VERSION', '231')
ACD_CSV_URL = 'https://ucdp.uu.se/downloads/ucdpprio/ucdp-prio-acd-{version}-csv.zip'
ACD_DTA_URL = 'https://ucdp.uu.se/downloads/ucdpprio/ucdp-prio-acd-{version}-dta.zip'
GED_CSV_URL = 'https://ucdp.uu.se/downloads/ged/ged{version}-csv.zip'

# date columns of the armed conflict data set that come in as strings in the csv
ACD_DATE_COLS = ('start_date', 'start_date2', 'ep_end_date')

# code books
DATE_PREC_LABELS = {1:'Exact date',
                    2:'2-6 days',
                    3:'Week',
                    4:'8-30 days or month',
                    5:'Over a month or year'}
REGION_LABELS = {1:'Europe',
                 2:'Middle East',
                 3:'Asia',
                 4:'Africa',
                 5:'Americas'}
INTENSITY_LABELS = {1:'Minor', 2:'War'}
CONFLICT_TYPE_LABELS = {1:'Extrasystemic',
                        2:'Interstate',
                        3:'Intrastate',
                        4:'Internationalized intrastate'}
VIOLENCE_TYPE_LABELS = {1:'State-based', 2:'Non-state', 3:'One-sided'}

# output chart
CHART_FNAME = 'ucdp_chart.png'
CHART_SIZE = (8, 5)  # inches
CHART_DPI = 300



def ucdp_url(template, version=None):
    """Fill in the release number of a UCDP download link.

    Parameters
    ----------
    template : str
        One of ACD_CSV_URL, ACD_DTA_URL, GED_CSV_URL.
    version : str, None
        Defaults to UCDP_VERSION.

    Returns
    -------
    str
    """

    if version is None:
        version = UCDP_VERSION
    return template.format(version=version)

def as_list(x):
    """Wrap a single column name into a list."""
    if isinstance(x, str):
        return [x]
    return list(x)

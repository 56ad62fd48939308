# ====================================================================================== #
# Small stand-ins for the UCDP tables used throughout the tests.
# ====================================================================================== #
import matplotlib
matplotlib.use('Agg')
import pytest

from .utils import *



def sample_acd():
    cols = ['conflict_id', 'location', 'side_a', 'side_a_id', 'side_b', 'side_b_id',
            'gwno_a', 'gwno_loc', 'region', 'year', 'intensity_level', 'type_of_conflict',
            'start_date', 'start_date2', 'ep_end_date']
    rows = [
        (309, 'Colombia', 'Government of Colombia', '100', 'FARC, ELN', '389, 390',
         '100', '100', '5', 2000, 2, 3, '1964-05-27', '1964-05-27', np.nan),
        (309, 'Colombia', 'Government of Colombia', '100', 'FARC, ELN', '389, 390',
         '100', '100', '5', 2001, 2, 3, '1964-05-27', '1964-05-27', np.nan),
        (333, 'Afghanistan', 'Government of Afghanistan, Government of United States of America',
         '700, 2', 'Taleban', '303', '700, 2', '700', '3', 2002, 2, 4,
         '1978-07-02', '1978-12-31', np.nan),
        (420, 'Cambodia (Kampuchea), Thailand', 'Government of Cambodia (Kampuchea)', '811',
         'Government of Thailand', '812', '811', '811, 800', '3', 2011, 1, 2,
         '2011-02-04', '2011-02-04', '2011-04-30'),
        (367, 'India', 'Government of India', '750', 'Kashmir insurgents, LeT', '418, 419',
         '750', '750', '3', 1990, 1, 3, '1989-12-31', '1990-01-01', np.nan),
        (367, 'India', 'Government of India', '750', 'Kashmir insurgents, LeT', '418, 419',
         '750', '750', '3', 1991, 2, 3, '1989-12-31', '1990-01-01', '1991-12-31'),
        ]
    return pd.DataFrame(rows, columns=cols)

def sample_ged():
    countries = {'Africa':['Nigeria', 'Somalia'],
                 'Asia':['Afghanistan', 'Myanmar (Burma)'],
                 'Middle East':['Syria', 'Yemen (North Yemen)']}
    rows = []
    i = 0
    for region, names in countries.items():
        for year in range(2010, 2020):
            for j in range(3):
                month = j*4+1
                rows.append({'id':i,
                             'year':year,
                             'region':region,
                             'country':names[j%2],
                             'date_start':f'{year}-{month:02d}-15',
                             'date_end':f'{year}-{month:02d}-{15+j}',
                             'date_prec':i%5+1,
                             'type_of_violence':i%3+1,
                             'best':i%7+1,
                             'latitude':10.+j,
                             'longitude':20.+j})
                i += 1
    return pd.DataFrame(rows)

@pytest.fixture
def acd():
    return sample_acd()

@pytest.fixture
def ged():
    return sample_ged()

# ====================================================================================== #
# Tests for the walkthrough as a whole.
# ====================================================================================== #
import pytest

from .pipeline import *
from .conftest import sample_acd, sample_ged



@pytest.fixture
def cached(monkeypatch):
    """Preload data so that nothing is downloaded."""
    monkeypatch.setattr(UCDPPRIO, '_df', {})
    monkeypatch.setattr(GED, '_df', None)
    UCDPPRIO.set_df(sample_acd())
    acd = sample_acd()
    for c in ACD_DATE_COLS:
        acd[c] = pd.to_datetime(acd[c])
    UCDPPRIO.set_df(acd, fmt='dta')
    GED.set_df(sample_ged())

def test_date_format_failure(acd):
    with pytest.raises(ValueError):
        date_format_failure(acd)

def test_acd_demo(acd):
    out = acd_demo(acd)

    assert out['dated']['start_date_label'].iloc[3]=='04 February 2011'
    assert out['dated']['start_date_month'].tolist()==[5, 5, 7, 2, 12, 12]
    assert out['durations'].set_index('conflict_id').loc[420,'days']==85

    assert out['side_a_wide'].shape==(6,16)
    assert len(out['side_b_long'])==10
    assert out['actors_per_conflict']['n_side_b'].tolist()==[2, 1, 2, 1]

    sides = out['sides']
    assert len(sides)==17
    assert set(sides['side'])=={'side_a', 'side_b'}
    assert sorted(sides.loc[sides['conflict_id']==333,'actor_id'])==['2', '303', '700']
    assert (sides['side']=='side_a').sum()==7

    assert out['regions']['region'].tolist()==['Americas', 'Americas', 'Asia', 'Asia', 'Asia', 'Asia']

    assert out['locations']['first_location'].tolist()==['Colombia', 'Colombia', 'Afghanistan',
                                                         'Cambodia', 'India', 'India']
    assert out['recoded']['type_of_conflict'].iloc[2]=='Internationalized intrastate'
    assert out['type_by_intensity'].values.sum()==6

    per_year = out['conflicts_per_year']
    assert per_year['year'].tolist()==[1990, 1991, 2000, 2001, 2002, 2011]
    assert per_year.drop(columns='year').values.sum()==6

    # input is left alone
    assert acd.equals(sample_acd())

def test_ged_demo(ged):
    out = ged_demo(ged)

    assert out['events']['date_prec'].cat.ordered
    assert pd.api.types.is_datetime64_any_dtype(out['events']['date_start'])
    assert out['fatalities']['total'].iloc[0]==357
    assert out['fatalities_by_region']['total'].sum()==357
    assert out['events_by_region']['n'].sum()==90
    assert np.isclose(out['share_by_violence']['share'].sum(), 1)
    assert out['yearly_by_region'].shape==(30,4)
    assert out['top_countries']['country'].iloc[0]=='Syria'
    assert np.isclose(out['precision_by_region'].sum(axis=1), 1).all()
    assert len(out['countries_lumped'])==6
    assert out['countries_lumped']['best'].sum()==357
    assert ged.equals(sample_ged())

def test_run(cached, tmp_path):
    results = run(dr=str(tmp_path))
    assert os.path.isfile(results['chart'])
    assert results['chart'].endswith(CHART_FNAME)
    assert len(results['gallery'].get_axes())==6
    # gallery is left open for display
    assert plt.fignum_exists(results['gallery'].number)
    plt.close('all')

    # same results from the Stata release, where dates come typed
    dtaresults = run('dta', dr=str(tmp_path/'dta'))
    assert dtaresults['durations'].equals(results['durations'])
    assert dtaresults['dated']['start_date_label'].equals(results['dated']['start_date_label'])
    plt.close('all')

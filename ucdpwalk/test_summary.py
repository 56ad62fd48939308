# ====================================================================================== #
# Tests for descriptive statistics.
# ====================================================================================== #
from .summary import *
from .clean import recode_date_prec, recode



def test_describe(ged):
    d = describe(ged, 'best')
    assert d.shape==(1,10)
    assert d['n'].iloc[0]==90
    assert d['total'].iloc[0]==357
    assert np.isclose(d['mean'].iloc[0], 357/90)
    assert d['min'].iloc[0]==1 and d['max'].iloc[0]==7
    assert np.isclose(d['skew'].iloc[0], stats.skew(ged['best']))

    d = describe(ged, 'best', by='region')
    assert d.index.tolist()==['Africa', 'Asia', 'Middle East']
    assert d['total'].tolist()==[115, 119, 123]
    assert (d['n']==30).all()
    assert d['total'].sum()==ged['best'].sum()

def test_count_by(ged):
    counts = count_by(ged, 'region')
    assert list(counts.columns)==['region', 'n']
    assert (counts['n']==30).all()

    counts = count_by(ged, ['region','country'])
    assert counts['n'].tolist()==[20, 20, 20, 10, 10, 10]
    assert counts['n'].sum()==len(ged)

def test_total_by(ged):
    totals = total_by(ged, 'region', 'best', name='fatalities')
    assert totals['fatalities'].tolist()==[115, 119, 123]

    # totals over categories of a recoded column
    totals = total_by(recode(ged, 'type_of_violence', VIOLENCE_TYPE_LABELS), 'type_of_violence')
    assert totals['best'].sum()==357

def test_share_by(ged):
    shares = share_by(ged, 'region')
    assert np.isclose(shares['share'], 1/3).all()

    shares = share_by(ged, 'region', col='best')
    assert np.isclose(shares['share'].sum(), 1)
    assert np.isclose(shares['share'].iloc[0], 115/357)

def test_yearly(ged):
    y = yearly(ged)
    assert y['year'].tolist()==list(range(2010, 2020))
    assert (y['n']==9).all()
    assert y['best'].sum()==357

    y = yearly(ged, by='region')
    assert y.shape==(30,4)
    assert list(y.columns)==['year', 'region', 'n', 'best']
    assert y.groupby('region')['best'].sum().tolist()==[115, 119, 123]

    y = yearly(ged, date_col='date_start')
    assert y['year'].tolist()==list(range(2010, 2020))
    assert y['best'].tolist()==yearly(ged)['best'].tolist()

def test_top_n(ged):
    top = top_n(ged, 'country', n=3)
    assert len(top)==3
    assert top['best'].is_monotonic_decreasing
    assert set(top['country'])=={'Nigeria', 'Afghanistan', 'Syria'}

    assert top_n(ged, 'country', n=10)['best'].sum()==357

def test_crosstab(ged):
    ged = recode_date_prec(ged)

    table = crosstab(ged, 'region', 'date_prec')
    assert table.values.sum()==90
    assert table.shape==(3,5)

    table = crosstab(ged, 'region', 'date_prec', normalize='index')
    assert np.isclose(table.sum(axis=1), 1).all()

def test_conflict_durations(acd):
    d = conflict_durations(acd).set_index('conflict_id')
    assert d.loc[420,'days']==85
    # end of 1990 is filled in but the following year's end is later
    assert d.loc[367,'days']==730
    assert d.loc[333,'ep_end_date']==pd.Timestamp('2002-12-31')
    assert d.shape==(4,3)

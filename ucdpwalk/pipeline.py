# ====================================================================================== #
# Walkthrough of importing, cleaning, summarizing, and plotting UCDP data.
# ====================================================================================== #
import matplotlib.pyplot as plt

from .utils import *
from .data import UCDPPRIO, GED
from . import clean
from . import summary
from . import plot as pplot



def load(fmt='csv'):
    """Armed conflict and event data sets.

    Parameters
    ----------
    fmt : str, 'csv'
        Release of the armed conflict data to read, 'csv' or 'dta'.

    Returns
    -------
    pd.DataFrame
        Armed conflict data.
    pd.DataFrame
        Event data.
    """

    return UCDPPRIO.df(fmt), GED.df()

def date_format_failure(acd):
    """Parse ISO formatted start dates as if they were day/month/year. This raises a
    ValueError from pandas."""
    return acd.pipe(clean.parse_dates, 'start_date', format='%d/%m/%Y')

def acd_demo(acd):
    """Cleaning examples on the armed conflict data.

    Parameters
    ----------
    acd : pd.DataFrame

    Returns
    -------
    dict
    """

    out = {}

    # dates are strings in the csv release
    out['dated'] = (acd.pipe(clean.parse_dates, list(ACD_DATE_COLS), format='%Y-%m-%d')
                       .pipe(clean.date_parts, 'start_date', parts=('year','month'))
                       .pipe(clean.reformat_dates, 'start_date', new_col='start_date_label'))
    out['durations'] = summary.conflict_durations(out['dated'])

    # one column per government on side A and one row per actor on side B
    out['side_a_wide'] = acd.pipe(clean.split_wide, 'side_a_id')
    out['side_b_long'] = (acd[['conflict_id','year','side_b','side_b_id']]
                          .pipe(clean.split_long, 'side_b_id', dtype=int))
    out['actors_per_conflict'] = (out['side_b_long']
                                  .groupby('conflict_id')['side_b_id']
                                  .nunique()
                                  .rename('n_side_b')
                                  .reset_index())

    # both sides stacked into a single column of participants
    out['sides'] = (acd[['conflict_id','year','side_a_id','side_b_id']]
                    .pipe(clean.pivot_longer, ['side_a_id','side_b_id'],
                          names_to='side', values_to='actor_id')
                    .pipe(clean.split_long, 'actor_id')
                    .pipe(clean.strip_pattern, 'side', r'_id$'))

    # conflicts can span several regions
    out['regions'] = (acd[['conflict_id','year','region']]
                      .pipe(clean.split_long, 'region', dtype=int)
                      .pipe(clean.recode, 'region', REGION_LABELS))

    # drop parenthetical remarks from location names and grab the first country
    out['locations'] = (acd[['conflict_id','year','location']]
                        .pipe(clean.strip_pattern, 'location', r'\s*\(.*?\)', new_col='location_clean')
                        .pipe(clean.extract_pattern, 'location_clean', r'^([^,]+)', 'first_location'))

    # codes to labels
    recoded = (acd.pipe(clean.recode, 'intensity_level', INTENSITY_LABELS, ordered=True)
                  .pipe(clean.recode, 'type_of_conflict', CONFLICT_TYPE_LABELS))
    out['recoded'] = recoded
    out['type_by_intensity'] = summary.crosstab(recoded, 'type_of_conflict', 'intensity_level')
    out['conflicts_per_year'] = (recoded.groupby(['year','type_of_conflict'], observed=True)
                                        .size()
                                        .rename('n')
                                        .reset_index()
                                        .pipe(clean.pivot_wider, 'year', 'type_of_conflict', 'n',
                                              fill_value=0))
    return out

def ged_demo(ged):
    """Summary examples on the event data.

    Parameters
    ----------
    ged : pd.DataFrame

    Returns
    -------
    dict
    """

    out = {}

    ged = (ged.pipe(clean.parse_dates, ['date_start','date_end'])
              .pipe(clean.recode_date_prec)
              .pipe(clean.recode, 'type_of_violence', VIOLENCE_TYPE_LABELS))
    out['events'] = ged

    out['fatalities'] = summary.describe(ged, 'best')
    out['fatalities_by_region'] = summary.describe(ged, 'best', by='region')
    out['events_by_region'] = summary.count_by(ged, 'region')
    out['share_by_violence'] = summary.share_by(ged, 'type_of_violence', col='best')
    out['yearly_by_region'] = summary.yearly(ged, 'best', by='region')
    out['top_countries'] = summary.top_n(ged, 'country', 'best', n=10)
    out['precision_by_region'] = summary.crosstab(ged, 'region', 'date_prec', normalize='index')
    out['countries_lumped'] = (ged.pipe(clean.lump_rare, 'country', n=5)
                                  .pipe(summary.total_by, 'country', 'best'))
    return out

def gallery(ged):
    """One example of each kind of plot.

    Parameters
    ----------
    ged : pd.DataFrame
        Event data after ged_demo() cleaning.

    Returns
    -------
    matplotlib.Figure
    """

    yearly = summary.yearly(ged, 'best', by='region')
    byregion = summary.total_by(ged, 'region', 'best').sort_values('best')

    fig, ax = plt.subplots(2, 3, figsize=(15,8))
    ax = ax.ravel()
    pplot.scatter(ged, 'date_start', 'best', ax=ax[0], c='region', logy=True)
    pplot.line(yearly, 'year', 'best', by='region', ax=ax[1])
    pplot.bar(byregion, 'region', 'best', ax=ax[2], horizontal=True)
    pplot.hist(ged, 'best', log=True, ax=ax[3])
    pplot.smooth(yearly.groupby('year', as_index=False)['best'].sum(), 'year', 'best', ax=ax[4])
    pplot.bar(summary.count_by(ged, 'date_prec', sort=False), 'date_prec', 'n', ax=ax[5])
    fig.tight_layout()
    return fig

def charts(ged, dr='.'):
    """Faceted trend in fatalities per region saved to disk.

    Parameters
    ----------
    ged : pd.DataFrame
        Event data after ged_demo() cleaning.
    dr : str, '.'

    Returns
    -------
    str
        Path to saved chart.
    """

    yearly = summary.yearly(ged, 'best', by='region')
    fig = pplot.facet(yearly, 'region', pplot.smooth, x='year', y='best', frac=.5)
    path = pplot.save(fig, dr=dr)
    plt.close(fig)
    return path

def run(fmt='csv', dr='.'):
    """Run the whole walkthrough.

    Parameters
    ----------
    fmt : str, 'csv'
    dr : str, '.'
        Where to save the chart.

    Returns
    -------
    dict
        Results of each step including 'chart', the path to the saved chart, and
        'gallery', a figure that is left open for display. Close it with
        plt.close(results['gallery']) when done.
    """

    acd, ged = load(fmt)
    if fmt=='dta':
        # dates are already parsed in the Stata release so write them back out as strings
        acd = acd.assign(**{c:acd[c].dt.strftime('%Y-%m-%d') for c in ACD_DATE_COLS
                            if pd.api.types.is_datetime64_any_dtype(acd[c])})

    results = acd_demo(acd)
    results.update(ged_demo(ged))
    results['gallery'] = gallery(results['events'])
    results['chart'] = charts(results['events'], dr=dr)
    return results

# ====================================================================================== #
# Descriptive statistics of conflict tables.
# ====================================================================================== #
import scipy.stats as stats

from .utils import *



def describe(df, col='best', by=None):
    """Summary statistics of a numeric column, optionally for each group.

    Parameters
    ----------
    df : pd.DataFrame
    col : str, 'best'
    by : str or list of str, None

    Returns
    -------
    pd.DataFrame
        Columns n, mean, sd, min, q25, median, q75, max, total, skew. One row per
        group or a single row if by is None.
    """

    def stat(x):
        x = x.dropna()
        return pd.Series({'n':x.size,
                          'mean':x.mean(),
                          'sd':x.std(),
                          'min':x.min(),
                          'q25':x.quantile(.25),
                          'median':x.median(),
                          'q75':x.quantile(.75),
                          'max':x.max(),
                          'total':x.sum(),
                          'skew':stats.skew(x) if x.size>2 else np.nan})

    if by is None:
        return stat(df[col]).to_frame().T
    return df.groupby(by, observed=True)[col].apply(stat).unstack()

def count_by(df, by, sort=True, name='n'):
    """Number of rows per group.

    Parameters
    ----------
    df : pd.DataFrame
    by : str or list of str
    sort : bool, True
        If True, largest groups first.
    name : str, 'n'

    Returns
    -------
    pd.DataFrame
    """

    counts = df.groupby(by, observed=True).size().rename(name)
    if sort:
        counts = counts.sort_values(ascending=False)
    return counts.reset_index()

def total_by(df, by, col='best', name=None):
    """Sum of col per group."""
    return (df.groupby(by, observed=True)[col]
              .sum()
              .rename(name or col)
              .reset_index())

def share_by(df, by, col=None):
    """Proportion of rows (or of the total of col) that falls into each group.

    Parameters
    ----------
    df : pd.DataFrame
    by : str or list of str
    col : str, None

    Returns
    -------
    pd.DataFrame
        With column 'share' summing to one.
    """

    if col is None:
        s = df.groupby(by, observed=True).size()
    else:
        s = df.groupby(by, observed=True)[col].sum()
    return (s/s.sum()).rename('share').reset_index()

def yearly(df, col='best', by=None, date_col=None):
    """Number of events and sum of col for each year.

    Parameters
    ----------
    df : pd.DataFrame
    col : str, 'best'
    by : str or list of str, None
        Further grouping, e.g. 'region'.
    date_col : str, None
        If given, year is taken from this date column instead of the 'year' column.

    Returns
    -------
    pd.DataFrame
        Columns year, (by), n, col.
    """

    if date_col is None:
        year = df['year']
    else:
        year = pd.to_datetime(df[date_col]).dt.year
    keys = [year.rename('year')] + [df[k] for k in as_list(by or [])]

    g = df.groupby(keys, observed=True)[col]
    return pd.concat((g.size().rename('n'), g.sum()), axis=1).reset_index()

def top_n(df, by, col='best', n=10):
    """Groups with the largest total of col."""
    assert n>0
    return total_by(df, by, col).nlargest(n, col).reset_index(drop=True)

def crosstab(df, row, col, normalize=False):
    """Contingency table of two categorical columns.

    Parameters
    ----------
    df : pd.DataFrame
    row : str
    col : str
    normalize : bool or str, False
        Passed to pd.crosstab. 'index' gives row proportions.

    Returns
    -------
    pd.DataFrame
    """

    return pd.crosstab(df[row], df[col], normalize=normalize)

def conflict_durations(df, start='start_date', end='ep_end_date', id_col='conflict_id'):
    """Duration of each conflict in days from its first start to its last end.

    Conflicts that have not ended are taken to run until the end of the last year in
    which they appear.

    Parameters
    ----------
    df : pd.DataFrame
        Conflict-year table.
    start : str, 'start_date'
    end : str, 'ep_end_date'
    id_col : str, 'conflict_id'

    Returns
    -------
    pd.DataFrame
        Columns id_col, start, end, days.
    """

    startdt = pd.to_datetime(df[start])
    enddt = pd.to_datetime(df[end])
    enddt = enddt.fillna(pd.to_datetime(df['year'].astype(int).astype(str)+'-12-31'))

    g = pd.DataFrame({id_col:df[id_col], start:startdt, end:enddt}).groupby(id_col)
    out = pd.concat((g[start].min(), g[end].max()), axis=1)
    out['days'] = (out[end]-out[start]).dt.days
    return out.reset_index()

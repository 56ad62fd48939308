# ====================================================================================== #
# Cleaning and reshaping of conflict tables. None of these modify the input DataFrame, so
# they can be chained with DataFrame.pipe.
# ====================================================================================== #
from .utils import *



# ============== #
# Type coercion. #
# ============== #
def coerce_types(df, ints=(), floats=(), strings=()):
    """Cast columns to int, float, or str.

    Parameters
    ----------
    df : pd.DataFrame
    ints : list of str, ()
        Columns with missing values are cast to the nullable Int64 type.
    floats : list of str, ()
    strings : list of str, ()

    Returns
    -------
    pd.DataFrame
    """

    df = df.copy()
    for c in as_list(ints):
        if df[c].isna().any():
            df[c] = pd.to_numeric(df[c]).astype('Int64')
        else:
            df[c] = df[c].astype(int)
    for c in as_list(floats):
        df[c] = df[c].astype(float)
    for c in as_list(strings):
        df[c] = df[c].astype('string')
    return df

def parse_dates(df, cols, format=None):
    """Parse string columns into datetimes.

    If format does not match the strings, pandas raises a ValueError.

    Parameters
    ----------
    df : pd.DataFrame
    cols : str or list of str
    format : str, None
        strftime format such as '%Y-%m-%d'. If None, pandas infers it.

    Returns
    -------
    pd.DataFrame
    """

    df = df.copy()
    for c in as_list(cols):
        df[c] = pd.to_datetime(df[c], format=format)
    return df

def reformat_dates(df, col, format='%d %B %Y', new_col=None):
    """Write parsed dates back out as strings in another format."""
    df = df.copy()
    df[new_col or col] = pd.to_datetime(df[col]).dt.strftime(format)
    return df

def date_parts(df, col, parts=('year','month','day')):
    """Add columns for components of a date like year or weekday.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    parts : tuple, ('year','month','day')
        Any attribute of the pandas .dt accessor. Columns are named f'{col}_{part}'.

    Returns
    -------
    pd.DataFrame
    """

    df = df.copy()
    dates = pd.to_datetime(df[col])
    for p in parts:
        df[f'{col}_{p}'] = getattr(dates.dt, p)
    return df



# ================= #
# String splitting. #
# ================= #
def split_wide(df, col, sep=', ', prefix=None, maxsplit=-1):
    """Split delimited string column into numbered columns. The original is dropped.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    sep : str, ', '
    prefix : str, None
        Defaults to col. New columns are f'{prefix}_1', f'{prefix}_2', ...
    maxsplit : int, -1

    Returns
    -------
    pd.DataFrame
    """

    prefix = prefix or col
    parts = df[col].astype('string').str.split(sep, n=maxsplit, expand=True)
    parts = parts.apply(lambda s: s.str.strip())
    parts.columns = [f'{prefix}_{i+1}' for i in range(parts.shape[1])]

    ix = df.columns.get_loc(col)
    left = df.iloc[:, :ix]
    right = df.iloc[:, ix+1:]
    return pd.concat((left, parts, right), axis=1)

def split_long(df, col, sep=', ', dtype=None):
    """Split delimited string column so that each part gets its own row.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    sep : str, ', '
    dtype : type, None
        Cast parts to this type, e.g. int for lists of ids. int requires every row to be
        filled; use 'Int64' for columns with gaps.

    Returns
    -------
    pd.DataFrame
    """

    df = df.assign(**{col:df[col].astype('string').str.split(sep)}).explode(col)
    df[col] = df[col].str.strip()
    if not dtype is None:
        df[col] = df[col].astype('string').astype(dtype)
    return df



# ========== #
# Reshaping. #
# ========== #
def pivot_longer(df, cols, names_to='side', values_to='value', id_cols=None):
    """Stack several columns into a single one (wide to long).

    Parameters
    ----------
    df : pd.DataFrame
    cols : list of str
        Columns to stack.
    names_to : str, 'side'
        Name of the column holding the names of the stacked columns.
    values_to : str, 'value'
    id_cols : list of str, None
        Columns to keep. Defaults to all columns that are not stacked.

    Returns
    -------
    pd.DataFrame
    """

    cols = as_list(cols)
    if id_cols is None:
        id_cols = [c for c in df.columns if not c in cols]
    return df.melt(id_vars=as_list(id_cols),
                   value_vars=cols,
                   var_name=names_to,
                   value_name=values_to)

def pivot_wider(df, index, names_from, values_from, fill_value=None, aggfunc='sum'):
    """Spread the levels of one column out into columns (long to wide)."""
    wide = df.pivot_table(index=index,
                          columns=names_from,
                          values=values_from,
                          fill_value=fill_value,
                          aggfunc=aggfunc,
                          observed=True)
    wide.columns = list(wide.columns)
    return wide.reset_index()



# ============== #
# Regex cleanup. #
# ============== #
def strip_pattern(df, col, pattern, repl='', new_col=None):
    """Replace regex matches then collapse and trim whitespace.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    pattern : str
        For example, r'\\(.*?\\)' removes parenthetical remarks.
    repl : str, ''
    new_col : str, None
        Defaults to overwriting col.

    Returns
    -------
    pd.DataFrame
    """

    df = df.copy()
    s = df[col].astype('string').str.replace(pattern, repl, regex=True)
    df[new_col or col] = s.str.replace(r'\s+', ' ', regex=True).str.strip()
    return df

def extract_pattern(df, col, pattern, new_col):
    """Save the first capture group of pattern into a new column. No match gives NA."""
    df = df.copy()
    df[new_col] = df[col].astype('string').str.extract(pattern, expand=False)
    return df



# ===================== #
# Categorical recoding. #
# ===================== #
def recode(df, col, labels, ordered=False, new_col=None):
    """Map codes onto labeled categories. Categories appear in the order of labels.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    labels : dict
        Code to label.
    ordered : bool, False
    new_col : str, None
        Defaults to overwriting col.

    Returns
    -------
    pd.DataFrame
    """

    df = df.copy()
    unknown = set(df[col].dropna().unique()) - set(labels)
    if unknown:
        warn(f"Codes {sorted(unknown)} in {col} have no label.")

    dtype = pd.CategoricalDtype(list(labels.values()), ordered=ordered)
    df[new_col or col] = df[col].map(labels).astype(dtype)
    return df

def recode_date_prec(df, col='date_prec', new_col=None):
    """Recode date precision into an ordered categorical from most to least precise."""
    return recode(df, col, DATE_PREC_LABELS, ordered=True, new_col=new_col)

def lump_rare(df, col, n=5, other='Other', new_col=None):
    """Keep the n most common levels and lump the rest together.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    n : int, 5
    other : str, 'Other'
    new_col : str, None

    Returns
    -------
    pd.DataFrame
    """

    assert n>0
    df = df.copy()
    keep = df[col].value_counts().index[:n]
    s = df[col].astype(object).where(df[col].isin(keep) | df[col].isna(), other)
    levels = list(keep) + ([other] if (s==other).any() else [])
    df[new_col or col] = pd.Categorical(s, categories=levels)
    return df

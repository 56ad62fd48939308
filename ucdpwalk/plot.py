# ====================================================================================== #
# Plotting examples for UCDP data.
# ====================================================================================== #
import matplotlib.pyplot as plt
from statsmodels.nonparametric.smoothers_lowess import lowess

from .utils import *



def _axes(ax, figsize=CHART_SIZE):
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    return ax

def _numeric(x):
    """Datetimes as days since the epoch so that they can be smoothed."""
    if pd.api.types.is_datetime64_any_dtype(x):
        return (x - pd.Timestamp(0)).dt.days.values.astype(float)
    return np.asarray(x, dtype=float)

def scatter(df, x, y, ax=None, c=None, alpha=.5, logy=False, **plot_kw):
    """Scatter plot of two columns.

    Parameters
    ----------
    df : pd.DataFrame
    x : str
    y : str
    ax : matplotlib.Axes, None
    c : str, None
        Column to color by or a color.
    alpha : float, .5
    logy : bool, False
    **plot_kw
        Passed to ax.set.

    Returns
    -------
    matplotlib.Axes
    """

    ax = _axes(ax)

    if not c is None and c in df.columns:
        for i, (k, g) in enumerate(df.groupby(c, observed=True)):
            ax.plot(g[x], g[y], '.', c=f'C{i}', alpha=alpha, mew=0, label=k)
        ax.legend(title=c, fontsize='small')
    else:
        ax.plot(df[x], df[y], '.', c=c or 'C0', alpha=alpha, mew=0)

    if logy:
        ax.set_yscale('log')
    ax.set(xlabel=x, ylabel=y, **plot_kw)
    return ax

def line(df, x, y, by=None, ax=None, **plot_kw):
    """Line plot with one line per group."""
    ax = _axes(ax)

    if by is None:
        df = df.sort_values(x)
        ax.plot(df[x], df[y], '-')
    else:
        for k, g in df.groupby(by, observed=True):
            g = g.sort_values(x)
            ax.plot(g[x], g[y], '-', label=k)
        ax.legend(title=by, fontsize='small')

    ax.set(xlabel=x, ylabel=y, **plot_kw)
    return ax

def bar(df, x, y, ax=None, horizontal=False, **plot_kw):
    """
    Parameters
    ----------
    df : pd.DataFrame
    x : str
        Column of bar labels.
    y : str
        Column of bar heights.
    ax : matplotlib.Axes, None
    horizontal : bool, False
    **plot_kw

    Returns
    -------
    matplotlib.Axes
    """

    ax = _axes(ax)
    labels = df[x].astype(str)

    if horizontal:
        ax.barh(labels, df[y])
        ax.set(xlabel=y, ylabel=x, **plot_kw)
    else:
        ax.bar(labels, df[y])
        ax.set(xlabel=x, ylabel=y, **plot_kw)
        ax.tick_params(axis='x', labelrotation=45)
    return ax

def hist(df, col, bins=30, ax=None, log=False, **plot_kw):
    """Histogram of a column.

    Parameters
    ----------
    df : pd.DataFrame
    col : str
    bins : int, 30
    ax : matplotlib.Axes, None
    log : bool, False
        If True, use logarithmically spaced bins over the positive values, which suits
        heavy tailed quantities like fatalities.
    **plot_kw

    Returns
    -------
    matplotlib.Axes
    """

    ax = _axes(ax)
    x = df[col].dropna().values

    if log:
        x = x[x>0]
        if x.size:
            bins = np.logspace(np.log10(x.min()), np.log10(x.max()), bins+1)
            ax.hist(x, bins=bins)
        else:
            warn(f"No positive values in {col} to place in log bins.")
        ax.set_xscale('log')
    else:
        ax.hist(x, bins=bins)

    ax.set(xlabel=col, ylabel='count', **plot_kw)
    return ax

def smooth(df, x, y, frac=2/3, ax=None, scatter=True, c='C0', **plot_kw):
    """LOWESS trend line, by default on top of the data.

    Parameters
    ----------
    df : pd.DataFrame
    x : str
        Numeric or datetime column.
    y : str
    frac : float, 2/3
        Fraction of data used for each local regression.
    ax : matplotlib.Axes, None
    scatter : bool, True
    c : str, 'C0'
    **plot_kw

    Returns
    -------
    matplotlib.Axes
    """

    assert 0<frac<=1
    ax = _axes(ax)
    df = df[[x, y]].dropna().sort_values(x)

    fit = lowess(df[y].values.astype(float), _numeric(df[x]), frac=frac, return_sorted=False)
    if scatter:
        ax.plot(df[x], df[y], '.', c='gray', alpha=.4, mew=0)
    ax.plot(df[x], fit, '-', c=c, lw=2)

    ax.set(xlabel=x, ylabel=y, **plot_kw)
    return ax

def facet(df, by, plotter, ncols=3, sharex=True, sharey=True, panel_size=(3,2.5), **kw):
    """Small multiples with one panel per group.

    Parameters
    ----------
    df : pd.DataFrame
    by : str
    plotter : function
        One of the plotting functions in this module or any function with signature
        plotter(df, ax=ax, **kw).
    ncols : int, 3
    sharex : bool, True
    sharey : bool, True
    panel_size : tuple, (3,2.5)
        Size of each panel in inches.
    **kw
        Passed to plotter.

    Returns
    -------
    matplotlib.Figure
    """

    groups = [(k, g) for k, g in df.groupby(by, observed=True)]
    assert len(groups), "No groups to plot."
    ncols = min(ncols, len(groups))
    nrows = int(np.ceil(len(groups)/ncols))

    fig, axes = plt.subplots(nrows, ncols,
                             figsize=(panel_size[0]*ncols, panel_size[1]*nrows),
                             sharex=sharex,
                             sharey=sharey,
                             squeeze=False)
    axes = axes.ravel()
    for ax, (k, g) in zip(axes, groups):
        plotter(g, ax=ax, **kw)
        ax.set_title(str(k))
    for ax in axes[len(groups):]:
        ax.set_visible(False)

    fig.tight_layout()
    return fig

def save(fig, fname=CHART_FNAME, dr='.', size=CHART_SIZE, dpi=CHART_DPI):
    """Write figure to disk at a fixed physical size.

    Parameters
    ----------
    fig : matplotlib.Figure
    fname : str, CHART_FNAME
    dr : str, '.'
    size : tuple, CHART_SIZE
        Width and height in inches.
    dpi : int, CHART_DPI

    Returns
    -------
    str
    """

    if not os.path.isdir(dr):
        os.makedirs(dr)
    path = f'{dr}/{fname}'
    if os.path.isfile(path):
        warn(f"Overwriting existing file {path}.")

    fig.set_size_inches(*size)
    fig.tight_layout()
    fig.savefig(path, dpi=dpi)
    return path

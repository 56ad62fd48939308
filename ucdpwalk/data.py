# ====================================================================================== #
# Module for importing data from UCDP.
# ====================================================================================== #
import zipfile
import requests
from tqdm import tqdm

from .utils import *



def download(url, fname=None, dr=None, overwrite=False, chunk_size=2**16):
    """Download a remote file unless a local copy already exists.

    Parameters
    ----------
    url : str
    fname : str, None
        Name of local file. Defaults to the last part of the url.
    dr : str, None
        Folder to save into. Defaults to DATADR.
    overwrite : bool, False
    chunk_size : int, 2**16

    Returns
    -------
    str
        Path to local file.
    """

    if dr is None:
        dr = DATADR
    if fname is None:
        fname = url.split('/')[-1]
    path = f'{dr}/{fname}'

    if os.path.isfile(path):
        if not overwrite:
            return path
        warn(f"Overwriting existing file {path}.")
    elif not os.path.isdir(dr):
        os.makedirs(dr)

    with requests.get(url, stream=True) as r:
        r.raise_for_status()
        total = int(r.headers.get('content-length', 0))

        # write to temporary file so that an interrupted download isn't mistaken for a
        # cached one
        with open(path+'.part', 'wb') as f, tqdm(total=total, unit='B', unit_scale=True,
                                                 desc=fname, disable=total==0) as pbar:
            for chunk in r.iter_content(chunk_size=chunk_size):
                f.write(chunk)
                pbar.update(len(chunk))
    os.replace(path+'.part', path)
    return path

def extract(zipfname, ext=('.csv',), member=None, dr=None, overwrite=False):
    """Extract a single member of a zip archive.

    Parameters
    ----------
    zipfname : str
    ext : tuple, ('.csv',)
        Allowed file extensions when searching for member.
    member : str, None
        Name of member to extract. By default, the first one with the right extension.
    dr : str, None
        Folder to extract into. Defaults to the folder containing the archive.
    overwrite : bool, False

    Returns
    -------
    str
        Path to extracted file.
    """

    if dr is None:
        dr = os.path.dirname(zipfname) or '.'
    if isinstance(ext, str):
        ext = (ext,)

    with zipfile.ZipFile(zipfname) as z:
        if member is None:
            names = [n for n in z.namelist()
                     if n.lower().endswith(tuple(e.lower() for e in ext)) and
                     not os.path.basename(n).startswith('.')]
            if not names:
                raise FileNotFoundError(f"No member ending with {ext} in {zipfname}.")
            member = names[0]

        path = f'{dr}/{os.path.basename(member)}'
        if os.path.isfile(path):
            if not overwrite:
                return path
            warn(f"Overwriting existing file {path}.")

        with z.open(member) as src, open(path, 'wb') as f:
            f.write(src.read())
    return path

def read_table(fname, **kwargs):
    """Parse delimited or Stata file into a DataFrame.

    Parameters
    ----------
    fname : str
    **kwargs
        Passed to the pandas reader.

    Returns
    -------
    pd.DataFrame
    """

    ext = os.path.splitext(fname)[1].lower()
    if ext=='.csv':
        return pd.read_csv(fname, **kwargs)
    elif ext=='.dta':
        return pd.read_stata(fname, **kwargs)
    elif ext=='.zip':
        return pd.read_csv(fname, compression='zip', **kwargs)
    raise NotImplementedError(f"Unrecognized file type {ext}.")

def fetch(url, ext='.csv', dr=None, **kwargs):
    """Download archive, extract data file, and read it."""
    zipfname = download(url, dr=dr)
    return read_table(extract(zipfname, ext=ext), **kwargs)



# =================================== #
# Useful quick data access functions. #
# =================================== #
class UCDPPRIO():
    """UCDP/PRIO armed conflict data set. One row per conflict-year.

    Data are downloaded once and kept in memory for the rest of the session.
    """
    _df = {}

    @classmethod
    def df(cls, fmt='csv', reload=False):
        """
        Parameters
        ----------
        fmt : str, 'csv'
            'csv' or 'dta'. The date columns are strings in the csv release and typed
            dates in the Stata release.
        reload : bool, False

        Returns
        -------
        pd.DataFrame
        """

        if reload or not fmt in cls._df:
            if fmt=='csv':
                cls._df[fmt] = fetch(ucdp_url(ACD_CSV_URL), '.csv', low_memory=False)
            elif fmt=='dta':
                cls._df[fmt] = fetch(ucdp_url(ACD_DTA_URL), '.dta')
            else:
                raise NotImplementedError(f"Unrecognized format {fmt}.")
        return cls._df[fmt]

    @classmethod
    def set_df(cls, df, fmt='csv'):
        cls._df[fmt] = df

    @classmethod
    def intrastate_df(cls, fmt='csv', year_range=False):
        """Internal conflicts, including those with foreign involvement.

        Parameters
        ----------
        fmt : str, 'csv'
        year_range : tuple, False
            If a tuple is passed, the first element of the tuple is taken
            to be the lower cutoff of year and second element is upper
            cutoff.

        Returns
        -------
        pd.DataFrame
        """

        df = cls.year_df(fmt, year_range)
        return df.loc[df['type_of_conflict'].isin([3,4])]

    @classmethod
    def year_df(cls, fmt='csv', year_range=False):
        df = cls.df(fmt)
        if year_range:
            ix = (df['year']>=year_range[0]) & (df['year']<=year_range[1])
            return df.loc[ix]
        return df
#end UCDPPRIO



class GED():
    """UCDP georeferenced event data set. One row per event."""
    _df = None

    @classmethod
    def df(cls, reload=False):
        if reload or cls._df is None:
            cls._df = fetch(ucdp_url(GED_CSV_URL), '.csv', low_memory=False)
        return cls._df

    @classmethod
    def set_df(cls, df):
        cls._df = df

    @classmethod
    def region_df(cls, region, year_range=False):
        """
        Parameters
        ----------
        region : str
            For example, 'Africa' or 'Middle East'.
        year_range : tuple, False

        Returns
        -------
        pd.DataFrame
        """

        df = cls.df()
        ix = df['region']==region
        if year_range:
            ix &= (df['year']>=year_range[0]) & (df['year']<=year_range[1])
        return df.loc[ix]
#end GED

# ====================================================================================== #
# Run the UCDP walkthrough from start to finish and save the faceted trend chart.
# Usage: python run_walkthrough.py [csv|dta] [output folder]
# ====================================================================================== #
import sys
import matplotlib
matplotlib.use('Agg')

from ucdpwalk import *



def main(fmt='csv', dr='.'):
    """Load both data sets, run each cleaning and summary example, and plot.
    """

    if not fmt in ('csv', 'dta'):
        raise NotImplementedError(f"Unrecognized format {fmt}.")

    results = pipe.run(fmt, dr)
    print(results['fatalities_by_region'])
    print(f"Saved chart to {results['chart']}.")
    pplot.plt.close(results['gallery'])
    return results

if __name__=='__main__':
    main(*sys.argv[1:3])

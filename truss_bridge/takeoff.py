# truss_bridge/takeoff.py
"""
TAKEOFF: Member Schedule and Steel Quantities
=============================================

PURPOSE:
--------
Turn a generated model into tables an estimator can use:
- member_schedule(): one row per member (role, profile, length, weight)
- steel_takeoff(): totals grouped by role and profile

Both return pandas DataFrames so results can be filtered, sorted, or
written straight to CSV (df.to_csv(...)).

NOTES:
------
- Only Beams are scheduled. The deck slab and abutment masses are concrete
  and are not part of the steel quantity.
- Weight uses the profile's plate area (fillets ignored), so it sits a few
  percent under the nominal lb/ft of the W shape.
"""

import pandas as pd

from .model import Model


SCHEDULE_COLUMNS = ['role', 'name', 'profile', 'length', 'area', 'weight']


def member_schedule(model: Model) -> pd.DataFrame:
    """
    Build a one-row-per-member schedule.

    Parameters:
    -----------
    model : Model
        A generated bridge model

    Returns:
    --------
    pd.DataFrame
        Columns: role, name, profile, length (m), area (m²), weight (kg)
    """
    rows = []
    for beam in model.beams():
        length = beam.length()
        area = beam.profile.area
        rows.append({
            'role': beam.role.value,
            'name': beam.name,
            'profile': beam.profile.name,
            'length': length,
            'area': area,
            'weight': area * length * beam.material.density,
        })

    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def steel_takeoff(model: Model) -> pd.DataFrame:
    """
    Total members, length and weight by (role, profile).

    Returns:
    --------
    pd.DataFrame
        Columns: role, profile, count, total_length (m), total_weight (kg),
        sorted by role then profile
    """
    schedule = member_schedule(model)
    if schedule.empty:
        return pd.DataFrame(columns=['role', 'profile', 'count', 'total_length', 'total_weight'])

    grouped = schedule.groupby(['role', 'profile'], as_index=False).agg(
        count=('length', 'size'),
        total_length=('length', 'sum'),
        total_weight=('weight', 'sum'),
    )
    return grouped.sort_values(['role', 'profile']).reset_index(drop=True)

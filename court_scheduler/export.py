"""
Export functionality for writing schedules to Excel.
"""

import pandas as pd
from typing import Dict, Optional, Union, IO
from .models import Schedule
from .config import SchedulerConfig


def write_excel(schedule: Schedule, config: SchedulerConfig,
                output: Union[str, IO[bytes]]) -> None:
    """
    Write schedule to Excel file with summary sheets.

    Args:
        schedule: Schedule to export
        config: Scheduler configuration
        output: Path or binary file object for the workbook
    """
    if config.verbose:
        print(f"Writing schedule to {output}")

    names = config.get_player_names() if config.player_names else None

    with pd.ExcelWriter(output, engine='xlsxwriter') as writer:
        _write_rounds(schedule, config, writer, names)

        if config.excel.include_summaries:
            _write_players(schedule, config, writer, names)
            _write_matrices(schedule, config, writer)


def _sheet_name(config: SchedulerConfig, key: str, default: str) -> str:
    return config.excel.sheets.get(key, default)


def _rename_players(df: pd.DataFrame, names: Optional[Dict[int, str]]) -> pd.DataFrame:
    """Replace player ids in the team and resting columns with names."""
    if not names or df.empty:
        return df

    def relabel(cell, sep):
        if cell is None or cell == "none":
            return cell
        return sep.join(names.get(int(p), p) for p in cell.split(sep))

    df = df.copy()
    df['Team 1'] = df['Team 1'].apply(lambda x: relabel(x, " & "))
    df['Team 2'] = df['Team 2'].apply(lambda x: relabel(x, " & "))
    df['Resting'] = df['Resting'].apply(lambda x: relabel(x, ", "))
    return df


def _write_rounds(schedule: Schedule, config: SchedulerConfig, writer,
                  names: Optional[Dict[int, str]]) -> None:
    """Write the main rounds sheet."""
    sheet_name = _sheet_name(config, 'rounds_name', 'Rounds')
    df = _rename_players(schedule.to_dataframe(), names)

    if df.empty:
        print("Warning: No rounds to export")
        df = pd.DataFrame(columns=['Round', 'Court', 'Format', 'Team 1', 'Team 2', 'Resting'])

    df.to_excel(writer, sheet_name=sheet_name, index=False)
    _format_rounds_worksheet(writer.sheets[sheet_name], writer.book, df)


def _write_players(schedule: Schedule, config: SchedulerConfig, writer,
                   names: Optional[Dict[int, str]]) -> None:
    """Write per-player statistics."""
    if not schedule.rounds:
        return

    sheet_name = _sheet_name(config, 'players_name', 'Players')
    df = schedule.player_stats()
    if names:
        df.insert(1, 'Name', df['Player'].map(names))

    df.to_excel(writer, sheet_name=sheet_name, index=False)

    # Add summary at the bottom
    worksheet = writer.sheets[sheet_name]
    summary_row = len(df) + 3
    worksheet.write(summary_row, 0, 'Summary Statistics')
    if 'Matches' in df.columns:
        worksheet.write(summary_row + 1, 0,
                        f'Matches per player: {df["Matches"].min()} to {df["Matches"].max()}')
    worksheet.write(summary_row + 2, 0,
                    f'Rests per player: {df["Rests"].min()} to {df["Rests"].max()}')


def _write_matrices(schedule: Schedule, config: SchedulerConfig, writer) -> None:
    """Write the partner and opponent matrices."""
    if schedule.pairing is None:
        return

    for kind, key, default in (("partners", "partners_name", "Partners"),
                               ("opponents", "opponents_name", "Opponents")):
        df = schedule.pairing.to_dataframe(kind)
        df.to_excel(writer, sheet_name=_sheet_name(config, key, default))


def _format_rounds_worksheet(worksheet, workbook, df: pd.DataFrame) -> None:
    """Apply formatting to the rounds worksheet."""
    header_format = workbook.add_format({
        'bold': True,
        'text_wrap': True,
        'valign': 'top',
        'fg_color': '#D7E4BC',
        'border': 1
    })

    column_widths = {
        'Round': 7,
        'Court': 7,
        'Format': 8,
        'Team 1': 20,
        'Team 2': 20,
        'Resting': 25,
    }

    for i, col in enumerate(df.columns):
        worksheet.set_column(i, i, column_widths.get(col, 12))

    for col_num, value in enumerate(df.columns.values):
        worksheet.write(0, col_num, value, header_format)

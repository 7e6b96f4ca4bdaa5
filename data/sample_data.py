"""Generate a sample forecast roster hours workbook for the import tab."""

import os

import pandas as pd


def generate_forecast_df() -> pd.DataFrame:
    """Weekly forecast hours per process, using the naming a store roster export would."""
    rows = [
        {"Process": "Decant", "Forecast Hours": 150},
        {"Process": "Sequence", "Forecast Hours": 310},
        {"Process": "LF", "Forecast Hours": 95},
        {"Process": "Pack away", "Forecast Hours": 28},
        {"Process": "Digital Shopkeeping", "Forecast Hours": 120},
        {"Process": "Online Picking", "Forecast Hours": 86},
        {"Process": "Total", "Forecast Hours": 789},
    ]
    return pd.DataFrame(rows)


def generate_sample_excel(output_dir: str) -> str:
    """Write a workbook with an unrelated first sheet and a 'Forecast Roster Hours' sheet."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "forecast_roster_hours.xlsx")
    notes = pd.DataFrame({"Notes": ["Weekly roster forecast exported from the store planner."]})
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        notes.to_excel(writer, sheet_name="Notes", index=False)
        generate_forecast_df().to_excel(writer, sheet_name="Forecast Roster Hours", index=False)
    return path


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    print(f"Sample forecast workbook written to {generate_sample_excel(out)}")

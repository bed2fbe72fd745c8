import pandas as pd
import pytest

from data_engineering.loading import load_survey


def test_load_csv(tmp_path, survey_df):
    path = tmp_path / 'survey.csv'
    survey_df.to_csv(path, index=False)

    df = load_survey(path)

    assert len(df) == len(survey_df)
    assert list(df.columns) == list(survey_df.columns)


def test_load_excel_sheet(tmp_path, survey_df):
    path = tmp_path / 'survey.xlsx'
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame({'notes': ['cover sheet']}).to_excel(writer, sheet_name='About', index=False)
        survey_df.to_excel(writer, sheet_name='Coded', index=False)

    df = load_survey(path, sheet_name='Coded')

    assert df['role'].iloc[0] == 'Fisher'


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_survey(tmp_path / 'nope.csv')


def test_unsupported_suffix(tmp_path):
    path = tmp_path / 'survey.json'
    path.write_text('{}')

    with pytest.raises(ValueError, match='Unsupported survey file type'):
        load_survey(path)

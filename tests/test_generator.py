"""Tests for writing, loading and reporting the survey datasets."""

import csv
import re
import shutil
import uuid
import pytest
import pandas as pd
import yaml

from survey_datasets.data_generation.generator import SurveyDataGenerator, write_csv, run
from survey_datasets.utils.config import PROJECT_ROOT

EXPECTED_FILES = {
    'media_trust_survey.csv': (250, 10),
    'social_media_engagement.csv': (300, 10),
    'communication_survey.csv': (50, 5),
    'news_consumption_patterns.csv': (300, 6),
}


def test_generate_all_row_counts():
    generator = SurveyDataGenerator()
    datasets = generator.generate_all()

    assert list(datasets) == [
        'media_trust_survey',
        'social_media_engagement',
        'communication_survey',
        'news_consumption_patterns',
    ]
    for name, df in datasets.items():
        assert df.shape == EXPECTED_FILES[f"{name}.csv"], name


def test_default_seed():
    assert SurveyDataGenerator().seed == 2025
    assert SurveyDataGenerator(seed=5).seed == 5


def test_unknown_dataset():
    generator = SurveyDataGenerator()
    with pytest.raises(ValueError):
        generator.generate_dataset('weather_survey')


def test_save_and_load(tmp_path):
    generator = SurveyDataGenerator()
    datasets = generator.generate_all()

    output_dir = tmp_path / 'nested' / 'data'
    paths = generator.save_all(datasets, output_dir)

    assert sorted(p.name for p in output_dir.iterdir()) == sorted(EXPECTED_FILES)
    for name, path in paths.items():
        loaded = SurveyDataGenerator.load_dataset(path)
        assert loaded.shape == datasets[name].shape
        assert list(loaded.columns) == list(datasets[name].columns)

    media = SurveyDataGenerator.load_dataset(paths['media_trust_survey'])
    pd.testing.assert_series_equal(
        media['trust_score'], datasets['media_trust_survey']['trust_score'],
        check_names=False, check_exact=False
    )
    social = SurveyDataGenerator.load_dataset(paths['social_media_engagement'])
    assert pd.api.types.is_integer_dtype(social['follower_count'])


def test_csv_well_formed(tmp_path):
    generator = SurveyDataGenerator()
    paths = generator.save_all(generator.generate_all(), tmp_path)

    for name, path in paths.items():
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        header, body = rows[0], rows[1:]
        n_rows, n_columns = EXPECTED_FILES[path.name]
        assert len(header) == n_columns
        assert len(body) == n_rows
        assert all(len(row) == n_columns for row in body), name

    # Labels with apostrophes survive the round trip
    media = SurveyDataGenerator.load_dataset(paths['media_trust_survey'])
    assert set(media['education']) <= {
        'High School', 'Some College', "Bachelor's", "Master's", 'PhD'
    }


def test_byte_identical_reruns(tmp_path):
    first = SurveyDataGenerator(seed=2025)
    second = SurveyDataGenerator(seed=2025)

    paths1 = first.save_all(first.generate_all(), tmp_path / 'run1')
    paths2 = second.save_all(second.generate_all(), tmp_path / 'run2')

    for name in paths1:
        assert paths1[name].read_bytes() == paths2[name].read_bytes(), name


def test_different_seed_changes_output(tmp_path):
    first = SurveyDataGenerator(seed=2025)
    second = SurveyDataGenerator(seed=2026)

    df1 = first.generate_dataset('media_trust_survey')
    df2 = second.generate_dataset('media_trust_survey')
    assert not df1.equals(df2)


def test_write_csv_creates_directory(tmp_path):
    df = pd.DataFrame({'id': ['P001', 'P002'], 'score': [1.5, 2.0]})

    path = write_csv(df, tmp_path / 'a' / 'b' / 'scores.csv')

    assert path.exists()
    assert path.read_text(encoding='utf-8') == "id,score\nP001,1.5\nP002,2.0\n"


def test_write_csv_failure(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')
    df = pd.DataFrame({'id': ['P001']})

    with pytest.raises(OSError):
        write_csv(df, blocker / 'scores.csv')


def test_summary_report():
    generator = SurveyDataGenerator()
    records = generator.summarize(generator.generate_all())

    assert [r['file'] for r in records] == list(EXPECTED_FILES)
    assert [(r['rows'], r['columns']) for r in records] == list(EXPECTED_FILES.values())

    report = generator.format_summary(records, 'data')
    assert "1. media_trust_survey.csv: 250 participants, 10 variables" in report
    assert "2. social_media_engagement.csv: 300 users, 10 variables" in report
    assert "3. communication_survey.csv: 50 participants, 5 variables" in report
    assert "4. news_consumption_patterns.csv: 300 observations, 6 variables" in report
    assert report.endswith("All files saved to: data/")


def test_run(tmp_path, capsys):
    paths = run(output_dir=tmp_path / 'data')

    assert len(paths) == 4
    assert all(p.exists() for p in paths.values())
    out = capsys.readouterr().out
    assert "Sample datasets created successfully!" in out
    assert "news_consumption_patterns.csv: 300 observations" in out


def test_run_write_failure(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')

    with pytest.raises(SystemExit, match=re.escape(f"Failed to write {blocker}: ")):
        run(output_dir=blocker)


def test_default_output_dir_ignores_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert SurveyDataGenerator().output_dir == PROJECT_ROOT / 'data'


def test_run_from_other_working_directory(tmp_path, monkeypatch):
    relative_dir = f"data-run-{uuid.uuid4().hex[:8]}"
    config_path = tmp_path / 'config.yaml'
    with open(config_path, 'w') as f:
        yaml.dump({'output': {'directory': relative_dir}}, f)

    workdir = tmp_path / 'elsewhere'
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    try:
        paths = run(config_path=config_path)

        assert all(p.parent == PROJECT_ROOT / relative_dir for p in paths.values())
        assert (PROJECT_ROOT / relative_dir / 'media_trust_survey.csv').exists()
        assert list(workdir.iterdir()) == []
    finally:
        shutil.rmtree(PROJECT_ROOT / relative_dir, ignore_errors=True)

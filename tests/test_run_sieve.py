"""
Tests for the command-line runner: config loading, queries and saving.
"""

import json
import sys
from pathlib import Path

import pandas as pd
import pytest

from prime_sieve.errors import InvalidArgument
from run_sieve import DEFAULTS, load_config, main, run

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


def write_config(tmp_path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


class TestLoadConfig:

    def test_defaults_without_file(self):
        config = load_config(None)
        assert config == DEFAULTS

    def test_file_values_and_float_bound(self, tmp_path):
        path = write_config(tmp_path, "N: 1.0e+3\nnth: [1, 2]\n")
        config = load_config(path)
        assert config['N'] == 1000
        assert config['nth'] == [1, 2]
        assert config['check'] == []

    def test_exponent_bound_without_dot(self, tmp_path):
        """YAML reads `1e6` as a string; it still converts to an int bound."""
        path = write_config(tmp_path, "N: 1e6\n")
        assert load_config(path)['N'] == 10**6

    def test_unparseable_bound(self, tmp_path):
        path = write_config(tmp_path, "N: ten\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_defaults_not_shared(self):
        """Mutating a loaded config leaves DEFAULTS untouched."""
        config = load_config(None)
        config['nth'].append(5)
        config['check'].append(7)
        assert DEFAULTS['nth'] == []
        assert DEFAULTS['check'] == []
        assert load_config(None)['nth'] == []

    def test_overrides_win_over_file(self, tmp_path):
        path = write_config(tmp_path, "N: 100\nsave: false\n")
        config = load_config(path, {'N': 50.0, 'save': True, 'show': None})
        assert config['N'] == 50
        assert config['save'] is True
        assert config['show'] is False

    def test_empty_file(self, tmp_path):
        path = write_config(tmp_path, "")
        assert load_config(path)['N'] == DEFAULTS['N']

    def test_shipped_default_config(self):
        config = load_config(DEFAULT_CONFIG)
        assert config['N'] == 10**6
        assert not config['save']


class TestRun:

    def test_queries(self):
        config = load_config(None, {'N': 10, 'nth': [1, 4], 'check': [4, 7]})
        results = run(config, verbose=False)
        assert results['count'] == 4
        assert results['largest'] == 7
        assert results['nth'] == {1: 2, 4: 7}
        assert results['check'] == {4: False, 7: True}

    def test_verify_step(self):
        config = load_config(None, {'N': 200, 'verify': True})
        results = run(config, verbose=False)
        assert results['verify']['ok']

    def test_invalid_query_raises(self):
        config = load_config(None, {'N': 10, 'check': [11]})
        with pytest.raises(InvalidArgument):
            run(config, verbose=False)

    def test_invalid_bound_raises(self):
        with pytest.raises(InvalidArgument):
            run(load_config(None, {'N': 1}), verbose=False)

    def test_save(self, tmp_path):
        config = load_config(None, {'N': 30, 'save': True, 'output_dir': str(tmp_path / "out")})
        results = run(config, verbose=False)

        df = pd.read_csv(results['csv_path'])
        assert list(df.columns) == ['k', 'prime']
        assert df['prime'].tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert df['k'].tolist() == list(range(1, 11))

        with open(tmp_path / "out" / "metadata_N30.json") as f:
            metadata = json.load(f)
        assert metadata['N'] == 30
        assert metadata['count'] == 10
        assert metadata['largest'] == 29

    def test_verbose_output(self, capsys):
        run(load_config(None, {'N': 10, 'show': True, 'nth': [2]}), verbose=True)
        out = capsys.readouterr().out
        assert "Sieve of Eratosthenes" in out
        assert "nth_prime(2) = 3" in out
        assert "[2, 3, 5, 7]" in out

    def test_metadata_per_bound(self, tmp_path):
        """Runs with different N into one directory keep separate metadata."""
        out = str(tmp_path / "out")
        run(load_config(None, {'N': 10, 'save': True, 'output_dir': out}), verbose=False)
        run(load_config(None, {'N': 30, 'save': True, 'output_dir': out}), verbose=False)

        with open(tmp_path / "out" / "metadata_N10.json") as f:
            assert json.load(f)['count'] == 4
        with open(tmp_path / "out" / "metadata_N30.json") as f:
            assert json.load(f)['count'] == 10


class TestMain:
    """End-to-end runs through the argparse entry point."""

    def run_main(self, monkeypatch, *argv):
        monkeypatch.setattr(sys, 'argv', ['run_sieve.py', *argv])
        main()

    def test_invalid_bound_exits_with_usage_error(self, tmp_path, monkeypatch, capsys):
        path = write_config(tmp_path, "N: 100\n")
        with pytest.raises(SystemExit) as exc:
            self.run_main(monkeypatch, '--config', str(path), '--N', '1')
        assert exc.value.code == 2
        assert "n must be greater than 1" in capsys.readouterr().err

    def test_out_of_range_query_exits_with_usage_error(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "N: 10\n")
        with pytest.raises(SystemExit) as exc:
            self.run_main(monkeypatch, '--config', str(path), '--check', '11')
        assert exc.value.code == 2

    def test_unparseable_config_bound_exits_with_usage_error(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "N: ten\n")
        with pytest.raises(SystemExit) as exc:
            self.run_main(monkeypatch, '--config', str(path))
        assert exc.value.code == 2

    def test_exponent_bound_in_config(self, tmp_path, monkeypatch, capsys):
        path = write_config(tmp_path, "N: 1e3\n")
        self.run_main(monkeypatch, '--config', str(path))
        assert "Primes <= 1,000: 168" in capsys.readouterr().out

    def test_flags_override_file(self, tmp_path, monkeypatch, capsys):
        out = tmp_path / "out"
        path = write_config(tmp_path, f"N: 100\nnth: [1]\nsave: false\noutput_dir: {tmp_path / 'unused'}\n")
        self.run_main(monkeypatch, '--config', str(path), '--N', '30', '--nth', '10',
                      '--save', '--output-dir', str(out))

        stdout = capsys.readouterr().out
        assert "nth_prime(10) = 29" in stdout
        assert "nth_prime(1) =" not in stdout
        assert (out / "primes_N30.csv").exists()
        assert not (tmp_path / "unused").exists()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

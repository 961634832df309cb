from pathlib import Path

from yamlset import load


def test_tmp_prints_path(invoke, private_tmpdir):
    result = invoke(["tmp"], input_data='{"a": 1}\n{"b": 2}\n')

    assert result.exit_code == 0
    path = Path(result.output.strip())
    assert path.name == "temp.yaml"
    assert path.parent.parent == private_tmpdir
    assert load(str(path)) == [{"a": 1}, {"b": 2}]


def test_tmp_twice_gives_distinct_files(invoke, private_tmpdir):
    first = invoke(["tmp"], input_data="{}\n").output.strip()
    second = invoke(["tmp"], input_data="{}\n").output.strip()
    assert first != second

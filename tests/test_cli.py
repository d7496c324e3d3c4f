import json

import cli


def test_missing_argument_exits_1(capsys):
	assert cli.main([]) == 1
	out, err = capsys.readouterr()
	assert "Please provide the target folder path" in err
	assert "Usage:" in err
	assert out == ""


def test_nonexistent_path_exits_1(tmp_path, capsys):
	assert cli.main([str(tmp_path / "nope")]) == 1
	out, err = capsys.readouterr()
	assert "does not exist or is not a directory" in err
	assert out == ""


def test_file_path_exits_1(tmp_path, capsys):
	target = tmp_path / "a.ts"
	target.write_text("export {};\n")
	assert cli.main([str(target)]) == 1
	assert "not a directory" in capsys.readouterr().err


def test_malformed_options_exit_1(tmp_path, capsys):
	assert cli.main([str(tmp_path), "--bogus"]) == 1
	assert "unrecognized arguments" in capsys.readouterr().err
	assert cli.main([str(tmp_path), "--jobs", "0"]) == 1
	assert "Usage:" in capsys.readouterr().err


def test_empty_directory_reports_zeros(tmp_path, capsys):
	assert cli.main([str(tmp_path)]) == 0
	out, err = capsys.readouterr()
	assert "Analyzing 0 files in" in out
	assert "Total Files Analyzed: 0" in out
	assert "Functions returning JSX (heuristic): 0" in out
	assert "Other functions: 0" in out
	assert "Total functions found: 0" in out


def test_report_for_sample_project(sample_project, capsys):
	assert cli.main([str(sample_project)]) == 0
	out, _ = capsys.readouterr()
	assert "Analyzing 3 files in" in out
	assert out.count("Processing file: ") == 3
	assert "node_modules" not in out
	assert "Total Files Analyzed: 3" in out
	assert "Functions returning JSX (heuristic): 4" in out
	assert "Other functions: 3" in out
	assert "Total functions found: 7" in out


def test_listing(sample_project, capsys):
	assert cli.main([str(sample_project), "--list"]) == 0
	out, _ = capsys.readouterr()
	assert "App (declaration) -> JSX" in out
	assert "helper (declaration) -> normal" in out
	assert "twice (arrow_expression) -> normal" in out


def test_json_output(sample_project, capsys):
	assert cli.main([str(sample_project), "--json", "--top-level-only"]) == 0
	data = json.loads(capsys.readouterr().out)
	assert data["report"]["total_functions"] == 6
	assert data["report"]["markup_producing_count"] == 3
	assert len(data["files"]) == 3


def test_analysis_error_exits_1(sample_project, capsys):
	(sample_project / "src" / "bad.ts").write_bytes(b"export const a = '\xff';\n")
	assert cli.main([str(sample_project)]) == 1
	out, err = capsys.readouterr()
	assert "An error occurred during analysis" in err
	assert "bad.ts" in err
	assert "Analysis Complete" not in out


def test_skip_invalid(sample_project, capsys):
	(sample_project / "src" / "broken.tsx").write_text("function ( {\n")
	assert cli.main([str(sample_project), "--strict-syntax", "--skip-invalid"]) == 0
	out, _ = capsys.readouterr()
	assert "Total Files Analyzed: 3" in out
	assert "Skipped files: 1" in out


def test_newer_syntax_does_not_abort(tmp_path, capsys):
	(tmp_path / "a.ts").write_text("export type * from './x';\nexport const f = () => 1;\n")
	assert cli.main([str(tmp_path)]) == 0
	out, _ = capsys.readouterr()
	assert "Total Files Analyzed: 1" in out

	assert cli.main([str(tmp_path), "--strict-syntax"]) == 1
	out, err = capsys.readouterr()
	assert "syntax error at line 1" in err
	assert "Analysis Complete" not in out

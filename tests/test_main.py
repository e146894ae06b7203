import json
import logging

import pytest

from logging_config import PACKAGE_LOGGERS
from main import build_parser, load_vertices, main, parse_vertices

SQUARE = "0,0,1,0,1,1,0,1"
ARROW = "0,0,2,0,2,2,1,1,0,2"


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_parse_vertices():
    assert parse_vertices("0, 0  1,0\n1 1").tolist() == [0, 0, 1, 0, 1, 1]
    with pytest.raises(ValueError):
        parse_vertices("0,0,a,1")


def test_load_vertices_formats(tmp_path):
    flat = tmp_path / "flat.json"
    flat.write_text(json.dumps([0, 0, 1, 0, 1, 1]))
    pairs = tmp_path / "pairs.json"
    pairs.write_text(json.dumps({"vertices": [[0, 0], [1, 0], [1, 1]]}))

    assert load_vertices(str(flat)).tolist() == [0, 0, 1, 0, 1, 1]
    assert load_vertices(str(pairs)).tolist() == [0, 0, 1, 0, 1, 1]

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"points": []}))
    with pytest.raises(ValueError):
        load_vertices(str(bad))


def test_parser_requires_one_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--vertices", SQUARE])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--area", "--weld", "--vertices", SQUARE])


def test_area(capsys):
    assert main(["--area", "--vertices", SQUARE]) == 0
    out = capsys.readouterr().out
    assert "Area: 1" in out
    assert "counter-clockwise" in out


def test_area_from_file(tmp_path, capsys):
    path = tmp_path / "arrow.json"
    path.write_text(json.dumps([[0, 0], [2, 0], [2, 2], [1, 1], [0, 2]]))
    main(["--area", "--input", str(path)])
    assert "Area: 3" in capsys.readouterr().out


def test_convex(capsys):
    main(["--convex", "--vertices", ARROW])
    out = capsys.readouterr().out
    assert "Convex: False" in out
    assert "Polygon shape: invalid" in out


def test_weld(capsys):
    main(["--weld", "--epsilon", "0.01", "--vertices", "0,0,0.001,0,1,0,1,1"])
    assert "Welded 4 -> 3 vertices" in capsys.readouterr().out


def test_arrange(capsys):
    main(["--arrange", "--vertices", "0,0,.75,2,1.5,2.5,2.5,2,2,.5,1,0"])
    assert "(0, 0) (1, 0) (2, 0.5) (2.5, 2) (1.5, 2.5) (0.75, 2)" in capsys.readouterr().out


def test_triangulate_with_plot(tmp_path, capsys):
    figure = tmp_path / "triangles.png"
    main(["--triangulate", "--vertices", ARROW, "--plot", str(figure)])
    assert "3 triangles" in capsys.readouterr().out
    assert figure.exists()


def test_decompose(capsys):
    main(["--decompose", "--vertices", ARROW])
    assert "convex pieces" in capsys.readouterr().out


def test_intersect(capsys):
    main(["--intersect", "-1", "0.5", "2", "0.5", "--convex-target", "--vertices", SQUARE])
    out = capsys.readouterr().out
    assert "2 intersection(s)" in out
    assert "Convex polygon contact: 2" in out


def test_errors_exit_with_status_1(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--area", "--vertices", "0,0,1"])
    assert info.value.code == 1
    assert "Error" in capsys.readouterr().out


def test_unknown_triangulator(capsys):
    with pytest.raises(SystemExit):
        main(["--triangulate", "--triangulator", "bayazit", "--vertices", ARROW])
    assert "Unknown triangulator" in capsys.readouterr().out


def test_log_file(tmp_path):
    log_file = tmp_path / "kernel.log"
    main(["--area", "-v", "--log-file", str(log_file), "--vertices", SQUARE])
    logging.getLogger("geometry").handlers[-1].flush()
    assert "Logging initialized." in log_file.read_text()

import pytest

from utils.input_parser import InputParser, InputValidationError


@pytest.mark.parametrize("parse, text, message", [
    (InputParser.parse_arrival_time, "abc", "ERROR: Arrival time must be a number!"),
    (InputParser.parse_arrival_time, "-1", "ERROR: Arrival time value cannot be negative!"),
    (InputParser.parse_burst_time, "1.5", "ERROR: Burst time must be a number!"),
    (InputParser.parse_burst_time, "0", "ERROR: Burst time value must be greater than zero!"),
    (InputParser.parse_time_quantum, "", "ERROR: Time quantum must be a number!"),
    (InputParser.parse_time_quantum, "0", "ERROR: Time quantum must be greater than zero!"),
])
def test_invalid_input_messages(parse, text, message):
    with pytest.raises(InputValidationError) as exc_info:
        parse(text)
    assert str(exc_info.value) == message


def test_valid_input():
    assert InputParser.parse_arrival_time(" 0 ") == 0
    assert InputParser.parse_burst_time("12") == 12
    assert InputParser.parse_time_quantum("5") == 5


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        InputParser.parse_burst_time("x")


def test_parse_file_skips_comments_and_bad_lines(tmp_path, capsys):
    path = tmp_path / "processes.txt"
    path.write_text("# Format: ArrivalTime,BurstTime\n"
                    "0,5\n"
                    "\n"
                    "2,x\n"
                    "3,0\n"
                    "4\n"
                    "1, 3\n", encoding="utf-8")

    assert InputParser.parse_file(str(path)) == [(0, 5), (1, 3)]
    assert capsys.readouterr().out.count("[WARNING]") == 3


def test_parse_missing_file(tmp_path):
    assert InputParser.parse_file(str(tmp_path / "missing.txt")) == []


def test_saved_file_can_be_loaded(tmp_path):
    path = str(tmp_path / "saved.txt")
    InputParser.save_processes_to_file([(0, 4), (2, 7)], path)
    assert InputParser.parse_file(path) == [(0, 4), (2, 7)]


def test_generate_random_processes():
    first = InputParser.generate_random_processes(num_processes=8, max_arrival=4,
                                                  max_burst=6, seed=42)
    again = InputParser.generate_random_processes(num_processes=8, max_arrival=4,
                                                  max_burst=6, seed=42)

    assert first == again
    assert len(first) == 8
    assert all(0 <= arrival <= 4 and 1 <= burst <= 6 for arrival, burst in first)


def test_print_process_summary(scheduler, capsys):
    scheduler.add_process(0, 5)
    scheduler.add_process(2, 3)
    InputParser.print_process_summary(scheduler.processes)

    out = capsys.readouterr().out
    assert "Total processes: 2" in out
    assert "Total burst time: 8ms" in out

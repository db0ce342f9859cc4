import main


def test_safe_filename():
    assert main.safe_filename("Round Robin (q=4)") == "Round_Robin_q_4"


def test_save_results(tmp_path, scheduler):
    scheduler.add_process(0, 3)
    scheduler.add_process(1, 2)
    results = []
    for time_quantum in (1, 2):
        scheduler.run_simulation(time_quantum)
        results.append(scheduler.get_results())

    main.save_results(results, output_dir=str(tmp_path))

    assert (tmp_path / "gantt_Round_Robin_q_1.png").exists()
    assert (tmp_path / "gantt_Round_Robin_q_2.png").exists()
    assert (tmp_path / "comparison.png").exists()

    report = (tmp_path / "results.txt").read_text(encoding="utf-8")
    assert "Round Robin (q=1)" in report
    assert "Average Waiting Time = " in report
    assert report.count("******** Simulation Started ********") == 2


def test_remove_all_messages(scheduler, capsys):
    scheduler.add_process(0, 1)
    main.remove_all(scheduler)

    assert scheduler.processes == []
    assert scheduler.event_log == []
    out = capsys.readouterr().out
    assert "All processes have been removed." in out
    assert "Please submit processes to be simulated..." in out


def test_add_process_rejects_bad_input(scheduler, monkeypatch, capsys):
    answers = iter(["abc", "3"])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))

    main.add_process(scheduler)

    assert scheduler.processes == []
    assert "ERROR: Arrival time must be a number!" in capsys.readouterr().out


def test_compare_quanta_does_not_print_events(scheduler, output, monkeypatch, tmp_path):
    monkeypatch.setattr(main, "RESULTS_DIR", str(tmp_path))
    scheduler.add_process(0, 3)
    lines_before = list(output.lines)

    main.compare_quanta(scheduler)

    assert output.lines == lines_before
    assert (tmp_path / "comparison.png").exists()

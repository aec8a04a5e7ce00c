"""Entry point — run() hands the app and configured bind address to uvicorn."""

import student_api.main as main_module


def test_run_starts_uvicorn_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)),
    )
    main_module.run()
    assert calls == [(
        "student_api.main:app",
        {
            "host": main_module.settings.host,
            "port": main_module.settings.port,
            "log_config": None,
        },
    )]

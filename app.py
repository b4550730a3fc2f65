#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from config import load_config
from core.timer_engine import TimerEngine
from logging_setup import setup_logging
from services.stats_service import StatsService
from services.task_service import TaskService
from services.timer_service import TimerService
from storage.db import Database
from storage.repos import SettingsRepo
from ui.main_window import MainWindow
from ui.tk_scheduler import TkScheduler

logger = logging.getLogger(__name__)


def main():
    cfg = load_config()
    setup_logging(log_dir=cfg.log_dir, console_level=cfg.log_level)

    db = Database(db_path=str(cfg.db_path))
    db.init_schema()

    settings_repo = SettingsRepo(db)
    engine = TimerEngine(settings_repo.load())
    logger.info("Loaded settings: %s", engine.settings)

    root = tk.Tk()

    task_service = TaskService(engine)
    timer_service = TimerService(
        engine,
        task_service,
        scheduler=TkScheduler(root),
        settings_repo=settings_repo,
        cue_profile=cfg.cue_profile,
    )
    stats_service = StatsService(timer_service)

    app = MainWindow(root, task_service, timer_service, stats_service)
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()

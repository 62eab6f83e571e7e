DASHBOARD_INTRO = """
## 📊 Health Dashboard
Track your health metrics and get AI-powered insights.
"""

ABOUT_TXT = """
## ℹ️ About – Personal Health Dashboard

This dashboard is a quick guide to what the app can do and how the pieces fit together.

---

### 🧭 What this app does (current version)

- **Daily health readings**
  Steps, heart rate, blood oxygen, hydration and sleep, one reading per day.

- **Mock data, in memory only**
  When you open the app, the last 30 days are generated at random.
  Nothing is written to disk: closing the tab discards every change.

- **Manual entry**
  The *Record* forms add a reading for today. The newest reading goes to the top and
  the oldest one drops off, so the window always holds the same number of days.

- **Charts and reports**
  Every metric has a history chart with its goal or normal range drawn in,
  and the Reports page shows 30-day averages side by side.

- **Rule-based assistant**
  The assistant does not use a language model. It looks for keywords in your
  question (steps, heart, oxygen, water, sleep, overall health) and compares your
  latest reading against fixed thresholds to pick an answer.

---

### 🎯 Goals used throughout the app

| Metric | Goal / normal range |
|---|---|
| Steps | 10,000 per day |
| Heart rate | 60-100 BPM at rest |
| Oxygen level | 95% or higher |
| Hydration | 3,000 ml per day |
| Sleep | 8 hours |

Percentages of a goal are reported as-is (you can be at 120% of your hydration goal);
only the progress bars stop at 100%.

---

### 🧑‍💻 How to use the UI

1. **Dashboard**: today's numbers, week-over-week change, daily goal progress,
   an entry form, a chart explorer and the assistant.
2. **Activity / Heart Rate / Oxygen Level / Hydration / Sleep**: one page per metric
   with current value, average, range, history chart and an entry form.
   The Hydration page has quick-add buttons (+250, +500, +1000 ml) for today's intake.
3. **AI Assistant**: chat with the assistant and read the per-metric analysis.
4. **Reports**: four charts with 30-day averages.

---

### 🧱 Application structure (high level)

- **`app.py`**: Gradio UI layout and event wiring.
- **`logic/` package**
  - `logic_stats.py`: averages, ranges, percent of goal.
  - `logic_insights.py`: status labels and written insights.
  - `logic_charts.py`: chart data frames.
  - `logic_progress.py`: entry form validation and quick add.
  - `logic_chat.py`: chat transcript and assistant replies.
  - `logic_pages.py`: what each page shows.
- **`agents/` package**
  - `assistant.py`: the rule-based assistant.
  - `responses.py`: its keyword table, thresholds and reply templates.
- **`storage.py`**: the in-memory reading store and mock data generator.
- **`health_config.py`**: settings read from `HEALTH_*` environment variables.
"""

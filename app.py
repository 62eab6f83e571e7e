import argparse
import sys
from functools import partial

import gradio as gr

from dash_board import ABOUT_TXT, DASHBOARD_INTRO
from health_config import DATA_SEED, SERVER_NAME, SERVER_PORT
from logging_setup import get_logger, setup_logging
from metrics import metric_info
from logic.logic_charts import CHART_TYPES, series_colors
from logic.logic_chat import (
    add_user_message_action,
    assistant_reply_action,
    new_transcript,
    reset_chat_action,
    to_chatbot,
)
from logic.logic_pages import (
    CARD_METRICS,
    REPORT_METRICS,
    load_series_action,
    metric_choices,
    render_chart,
    render_dashboard_cards,
    render_insight_sections,
    render_metric_page,
    render_overview,
    render_reports,
)
from logic.logic_progress import (
    FIELD_BOUNDS,
    FORM_DEFAULTS,
    QUICK_ADD_AMOUNTS,
    quick_add_hydration_action,
    submit_reading_action,
)

logger = get_logger(__name__)

_parser = argparse.ArgumentParser(add_help=False)
_parser.add_argument("--seed", type=int, default=None)
_parser.add_argument("--port", type=int, default=None)
_args, _unknown = _parser.parse_known_args(sys.argv[1:])
SEED = _args.seed if _args.seed is not None else DATA_SEED

PAGES = [
    "dashboard",
    "steps",
    "heart_rate",
    "oxygen_level",
    "hydration",
    "sleep_hours",
    "assistant",
    "reports",
    "about",
]

METRIC_PAGE_TEXT = {
    "steps": ("🏃 Activity Tracking", "Monitor your daily steps and activity level", "Record Activity"),
    "heart_rate": ("❤️ Heart Rate Monitoring", "Track your heart rate (BPM) over time", "Record Heart Rate"),
    "oxygen_level": ("🫁 Oxygen Level", "Track your blood oxygen saturation (SpO2)", "Record Oxygen Level"),
    "hydration": ("💧 Hydration Tracking", "Monitor your daily water intake", "Record Hydration"),
    "sleep_hours": ("🌙 Sleep Tracking", "Monitor your sleep duration and quality", "Record Sleep"),
}


def switch_page(page_name: str):
    """Return visibility updates for all main pages based on the active page name."""
    return tuple(gr.update(visible=(page_name == p)) for p in PAGES)


def build_reading_form():
    """
    Lay out the five-field entry form.

    Returns (inputs, errors, save_button, status) where `inputs` and `errors`
    follow the FORM_FIELDS order.
    """
    with gr.Row():
        with gr.Column(min_width=160):
            steps = gr.Number(
                label="Steps",
                value=FORM_DEFAULTS["steps"],
                info="Number of steps walked today",
            )
            steps_err = gr.Markdown("")
        with gr.Column(min_width=160):
            heart_rate = gr.Number(
                label="Heart Rate (BPM)",
                value=FORM_DEFAULTS["heart_rate"],
                info="Your current heart rate in beats per minute",
            )
            heart_err = gr.Markdown("")
        with gr.Column(min_width=160):
            oxygen_level = gr.Slider(
                label="Oxygen Level (SpO2)",
                minimum=FIELD_BOUNDS["oxygen_level"][0],
                maximum=FIELD_BOUNDS["oxygen_level"][1],
                step=1,
                value=FORM_DEFAULTS["oxygen_level"],
                info="Blood oxygen saturation level",
            )
            oxygen_err = gr.Markdown("")
    with gr.Row():
        with gr.Column(min_width=160):
            hydration = gr.Number(
                label="Hydration (ml)",
                value=FORM_DEFAULTS["hydration"],
                info="Amount of water consumed today",
            )
            hydration_err = gr.Markdown("")
        with gr.Column(min_width=160):
            sleep_hours = gr.Slider(
                label="Sleep (hours)",
                minimum=0,
                maximum=12,
                step=0.5,
                value=FORM_DEFAULTS["sleep_hours"],
                info="Hours of sleep last night",
            )
            sleep_err = gr.Markdown("")
    save_btn = gr.Button("Save Health Metrics", variant="primary")
    status = gr.Markdown("")
    inputs = [steps, heart_rate, oxygen_level, hydration, sleep_hours]
    errors = [steps_err, heart_err, oxygen_err, hydration_err, sleep_err]
    return inputs, errors, save_btn, status


def history_plot(metric: str, title: str):
    info = metric_info(metric)
    return gr.LinePlot(
        x="date",
        y="value",
        color="series",
        color_map=series_colors(metric),
        title=title,
        x_title="Date",
        y_title=info.label,
        height=300,
    )


with gr.Blocks(title="Personal Health Dashboard") as demo:
    # Global states
    store_state = gr.State(None)
    chat_state = gr.State(new_transcript())

    with gr.Row():
        # Left navigation
        with gr.Column(scale=1, min_width=180):
            gr.Markdown("### Navigation")
            btn_dashboard = gr.Button("🏠 Dashboard")
            btn_activity = gr.Button("🏃 Activity")
            btn_heart = gr.Button("❤️ Heart Rate")
            btn_oxygen = gr.Button("🫁 Oxygen Level")
            btn_hydration = gr.Button("💧 Hydration")
            btn_sleep = gr.Button("🌙 Sleep")
            btn_assistant = gr.Button("🧠 AI Assistant")
            btn_reports = gr.Button("📈 Reports")
            gr.Markdown("---")
            btn_about = gr.Button("ℹ️ About", variant="secondary")

        # Right content
        with gr.Column(scale=4):
            page_columns = {}

            # Dashboard
            with gr.Column(visible=True) as page_dashboard:
                gr.Markdown(DASHBOARD_INTRO)
                with gr.Row():
                    dash_cards = [gr.Markdown("Loading...") for _ in CARD_METRICS]

                with gr.Tabs():
                    with gr.Tab("Overview"):
                        with gr.Row():
                            with gr.Column():
                                overview_goals = gr.Markdown("Loading...")
                                steps_bar = gr.Slider(0, 100, label="Steps progress (%)", interactive=False)
                                hydration_bar = gr.Slider(0, 100, label="Hydration progress (%)", interactive=False)
                                sleep_bar = gr.Slider(0, 100, label="Sleep progress (%)", interactive=False)
                            with gr.Column():
                                overview_vitals = gr.Markdown("")
                                overview_tips = gr.Markdown("")
                    with gr.Tab("Input Data"):
                        gr.Markdown("### Enter Health Metrics")
                        dash_inputs, dash_errors, dash_save_btn, dash_status = build_reading_form()
                    with gr.Tab("Charts"):
                        gr.Markdown("### Health Metrics Visualization")
                        with gr.Row():
                            chart_metric = gr.Dropdown(
                                label="Metric",
                                choices=metric_choices(),
                                value="steps",
                            )
                            chart_type = gr.Radio(
                                label="Chart type",
                                choices=CHART_TYPES,
                                value="line",
                            )
                        explorer_line = gr.LinePlot(x="date", y="value", color="series", height=400)
                        explorer_bar = gr.BarPlot(
                            x="entry", y="value", color="series", x_title="Date", height=400, visible=False
                        )
                        explorer_msg = gr.Markdown("")
                    with gr.Tab("AI Assistant"):
                        gr.Markdown("### AI Health Assistant")
                        dash_chatbot = gr.Chatbot(
                            value=to_chatbot(new_transcript()),
                            label="Health assistant",
                            type="messages",
                            height=400,
                        )
                        dash_chat_input = gr.Textbox(
                            label="Your message",
                            placeholder="Ask about your health metrics...",
                        )
                        dash_chat_status = gr.Markdown("")
                        dash_chat_send = gr.Button("Send")
            page_columns["dashboard"] = page_dashboard

            # One page per metric
            metric_pages = {}
            for metric, (title, subtitle, record_title) in METRIC_PAGE_TEXT.items():
                info = metric_info(metric)
                with gr.Column(visible=False) as page_col:
                    gr.Markdown(f"## {title}\n{subtitle}")
                    with gr.Row():
                        headline = gr.Markdown("Loading...")
                        stats_md = gr.Markdown("")
                    progress = gr.Slider(
                        0,
                        100,
                        label="Progress toward goal (%)",
                        interactive=False,
                        visible=info.has_goal,
                    )
                    quick_buttons = []
                    quick_status = None
                    if metric == "hydration":
                        with gr.Row():
                            quick_buttons = [
                                gr.Button(f"+{amount} ml", size="sm") for amount in QUICK_ADD_AMOUNTS
                            ]
                        quick_status = gr.Markdown("")
                    plot = history_plot(metric, f"{info.title} History")
                    empty_msg = gr.Markdown("")
                    gr.Markdown(f"### {record_title}")
                    inputs, errors, save_btn, status = build_reading_form()
                page_columns[metric] = page_col
                metric_pages[metric] = {
                    "outputs": [headline, stats_md, progress, plot, empty_msg],
                    "inputs": inputs,
                    "errors": errors,
                    "save_btn": save_btn,
                    "status": status,
                    "quick_buttons": quick_buttons,
                    "quick_status": quick_status,
                }

            # Assistant
            with gr.Column(visible=False) as page_assistant:
                gr.Markdown("## 🧠 AI Health Assistant\nGet personalized health insights and recommendations")
                with gr.Tabs():
                    with gr.Tab("Chat"):
                        gr.Markdown("### Chat with Your Health Assistant")
                        chatbot = gr.Chatbot(
                            value=to_chatbot(new_transcript()),
                            label="Health assistant",
                            type="messages",
                            height=500,
                        )
                        chat_input = gr.Textbox(
                            label="Your message",
                            placeholder="Ask about your health metrics...",
                        )
                        chat_status = gr.Markdown("")
                        with gr.Row():
                            chat_send_btn = gr.Button("Send", variant="primary")
                            chat_reset_btn = gr.Button("Clear conversation")
                    with gr.Tab("Insights"):
                        gr.Markdown("### AI-Generated Health Insights\nPersonalized analysis based on your health data")
                        insights_md = gr.Markdown("Loading...")
            page_columns["assistant"] = page_assistant

            # Reports
            with gr.Column(visible=False) as page_reports:
                gr.Markdown("## 📈 Health Reports\nComprehensive view of your health metrics")
                report_plots = []
                report_footers = []
                report_titles = {
                    "steps": "Activity Report",
                    "heart_rate": "Heart Rate Report",
                    "hydration": "Hydration Report",
                    "sleep_hours": "Sleep Report",
                }
                with gr.Row():
                    for metric in REPORT_METRICS[:2]:
                        with gr.Column():
                            report_plots.append(history_plot(metric, report_titles[metric]))
                            report_footers.append(gr.Markdown(""))
                with gr.Row():
                    for metric in REPORT_METRICS[2:]:
                        with gr.Column():
                            report_plots.append(history_plot(metric, report_titles[metric]))
                            report_footers.append(gr.Markdown(""))
            page_columns["reports"] = page_reports

            # About
            with gr.Column(visible=False) as page_about:
                gr.Markdown(ABOUT_TXT)
            page_columns["about"] = page_about

    page_outputs = [page_columns[p] for p in PAGES]
    dashboard_outputs = [
        *dash_cards,
        overview_goals,
        steps_bar,
        hydration_bar,
        sleep_bar,
        overview_vitals,
        overview_tips,
    ]

    def render_dashboard(store):
        return (*render_dashboard_cards(store), *render_overview(store))

    # ====== Event bindings ======

    # Initial load: simulated fetch, then fill the dashboard.
    # Listeners that sleep are not concurrency-limited.
    demo.load(
        partial(load_series_action, seed=SEED),
        inputs=None,
        outputs=[store_state],
        concurrency_limit=None,
    ).then(
        render_dashboard,
        inputs=[store_state],
        outputs=dashboard_outputs,
    ).then(
        render_chart,
        inputs=[store_state, chart_metric, chart_type],
        outputs=[explorer_line, explorer_bar, explorer_msg],
    )

    # Navigation
    btn_dashboard.click(
        lambda: switch_page("dashboard"),
        inputs=None,
        outputs=page_outputs,
    ).then(
        render_dashboard,
        inputs=[store_state],
        outputs=dashboard_outputs,
    ).then(
        to_chatbot,
        inputs=[chat_state],
        outputs=[dash_chatbot],
    )

    for metric, button in [
        ("steps", btn_activity),
        ("heart_rate", btn_heart),
        ("oxygen_level", btn_oxygen),
        ("hydration", btn_hydration),
        ("sleep_hours", btn_sleep),
    ]:
        button.click(
            partial(switch_page, metric),
            inputs=None,
            outputs=page_outputs,
        ).then(
            partial(render_metric_page, metric=metric),
            inputs=[store_state],
            outputs=metric_pages[metric]["outputs"],
        )

    btn_assistant.click(
        lambda: switch_page("assistant"),
        inputs=None,
        outputs=page_outputs,
    ).then(
        render_insight_sections,
        inputs=[store_state],
        outputs=[insights_md],
    ).then(
        to_chatbot,
        inputs=[chat_state],
        outputs=[chatbot],
    )

    btn_reports.click(
        lambda: switch_page("reports"),
        inputs=None,
        outputs=page_outputs,
    ).then(
        render_reports,
        inputs=[store_state],
        outputs=[*report_plots, *report_footers],
    )

    btn_about.click(
        lambda: switch_page("about"),
        inputs=None,
        outputs=page_outputs,
    )

    # Dashboard entry form and chart explorer
    dash_save_btn.click(
        submit_reading_action,
        inputs=[*dash_inputs, store_state],
        outputs=[store_state, dash_status, *dash_errors, *dash_inputs],
    ).then(
        render_dashboard,
        inputs=[store_state],
        outputs=dashboard_outputs,
    ).then(
        render_chart,
        inputs=[store_state, chart_metric, chart_type],
        outputs=[explorer_line, explorer_bar, explorer_msg],
    )

    for control in (chart_metric, chart_type):
        control.change(
            render_chart,
            inputs=[store_state, chart_metric, chart_type],
            outputs=[explorer_line, explorer_bar, explorer_msg],
        )

    # Metric page entry forms and hydration quick add
    for metric, page in metric_pages.items():
        page["save_btn"].click(
            submit_reading_action,
            inputs=[*page["inputs"], store_state],
            outputs=[store_state, page["status"], *page["errors"], *page["inputs"]],
        ).then(
            partial(render_metric_page, metric=metric),
            inputs=[store_state],
            outputs=page["outputs"],
        )
        for amount, button in zip(QUICK_ADD_AMOUNTS, page["quick_buttons"]):
            button.click(
                partial(quick_add_hydration_action, amount),
                inputs=[store_state],
                outputs=[store_state, page["quick_status"]],
            ).then(
                partial(render_metric_page, metric=metric),
                inputs=[store_state],
                outputs=page["outputs"],
            )

    # Chat: both chat views share one transcript
    for box, bot, status, send in [
        (chat_input, chatbot, chat_status, chat_send_btn),
        (dash_chat_input, dash_chatbot, dash_chat_status, dash_chat_send),
    ]:
        for trigger in (send.click, box.submit):
            trigger(
                add_user_message_action,
                inputs=[box, chat_state],
                outputs=[chat_state, bot, box, status],
            ).then(
                assistant_reply_action,
                inputs=[chat_state, store_state],
                outputs=[chat_state, bot, status],
                concurrency_limit=None,
            )

    chat_reset_btn.click(
        reset_chat_action,
        inputs=None,
        outputs=[chat_state, chatbot, chat_status],
    )


def main() -> None:
    setup_logging()
    port = _args.port or SERVER_PORT
    logger.info("launching", server_name=SERVER_NAME, port=port, seed=SEED)
    demo.launch(server_name=SERVER_NAME, server_port=port)


if __name__ == "__main__":
    main()

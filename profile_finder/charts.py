from __future__ import annotations

from typing import Dict

import plotly.graph_objects as go

from .analytics import language_chart_data, repo_star_data
from .models import AnalyticsSummary

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8", "#82CA9D", "#FFC658"]
BAR_COLOR = "#8884d8"
CHART_HEIGHT = 300


def language_pie(summary: AnalyticsSummary) -> go.Figure:
    data = language_chart_data(summary)
    fig = go.Figure(
        go.Pie(
            labels=[d["name"] for d in data],
            values=[d["value"] for d in data],
            marker={"colors": [COLORS[i % len(COLORS)] for i in range(len(data))]},
            textinfo="label+percent",
            sort=False,
        )
    )
    fig.update_layout(height=CHART_HEIGHT, showlegend=False, margin={"t": 10, "b": 10, "l": 10, "r": 10})
    return fig


def top_repos_bar(summary: AnalyticsSummary) -> go.Figure:
    data = repo_star_data(summary)
    fig = go.Figure(
        go.Bar(
            x=[d["name"] for d in data],
            y=[d["stars"] for d in data],
            customdata=[d["fullName"] for d in data],
            hovertemplate="%{customdata}<br>%{y} stars<extra></extra>",
            marker_color=BAR_COLOR,
        )
    )
    fig.update_layout(height=CHART_HEIGHT, xaxis_tickangle=-45, margin={"t": 10, "b": 80, "l": 40, "r": 10})
    return fig


def render_charts(summary: AnalyticsSummary) -> Dict[str, str]:
    """HTML fragments for the page; plotly.js is pulled from the CDN once."""
    return {
        "languages": language_pie(summary).to_html(full_html=False, include_plotlyjs="cdn"),
        "top_repos": top_repos_bar(summary).to_html(full_html=False, include_plotlyjs=False),
    }

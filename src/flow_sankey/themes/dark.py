"""Dark theme with a soft multi-color palette."""

from flow_sankey.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_palette=[
        "#6366f1",  # indigo
        "#f97316",  # orange
        "#3b82f6",  # blue
        "#a855f7",  # purple
        "#ec4899",  # pink
        "#14b8a6",  # teal
    ],
    node_stroke="#1f1f1f",
    node_stroke_width=1.0,
    link_opacity=0.35,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=22.0,
)

"""Default light theme (single blue, translucent links)."""

from flow_sankey.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="#ffffff",
    node_palette=["#18a0fb"],
    node_stroke="none",
    node_stroke_width=0.0,
    link_opacity=0.3,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=20.0,
)

# <img> markup for a RenderData; optional attributes are left out when empty
IMG_TEMPLATE = (
    '<img src="{{ url }}"'
    '{% if src_set %} srcset="{{ src_set }}"{% endif %}'
    '{% if sizes %} sizes="{{ sizes }}"{% endif %}'
    '{% if width %} width="{{ width }}"{% endif %}'
    '{% if height %} height="{{ height }}"{% endif %}'
    ' alt="{{ alt }}" loading="lazy" decoding="async">'
)

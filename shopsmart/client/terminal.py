"""
Plain-text rendering of a storefront page tree.
"""

from typing import Any, Dict, List


def render_page_text(page: Dict[str, Any]) -> str:
    lines: List[str] = []

    navbar = page["navbar"]
    links = "  ".join(f"[{link['label']}]" if link["active"] else link["label"] for link in navbar["links"])
    lines.append(f"{navbar['brand']}    {links}  <{navbar['button']}>")
    lines.append("=" * 60)

    lines.extend(render_dashboard_text(page["main"]))

    lines.append("-" * 60)
    status = page["footer"]["backend_status"]
    status_line = f"Backend Status: {status['label']}"
    if status.get("message"):
        status_line += f" | {status['message']}"
    lines.append(status_line)
    lines.append(page["footer"]["copyright"])
    return "\n".join(lines)


def render_dashboard_text(view: Dict[str, Any]) -> List[str]:
    if view["view"] != "products":
        return [view["message"]]

    lines = [f"{view['title']} - {view['count_label']}", ""]
    if view["empty_message"]:
        lines.append(view["empty_message"])
        return lines

    for card in view["cards"]:
        badge = card["badge"]
        action = card["action"]
        image = card["placeholder"]["text"] if card["placeholder"] else card["image"]["src"]
        button = f"({action['label']})" if action["disabled"] else f"[{action['label']}]"
        lines.append(f"#{card['id']} {card['name']}  {card['price']}  {badge['icon']} {badge['label']}")
        if card["description"]:
            lines.append(f"    {card['description']}")
        lines.append(f"    image: {image}")
        lines.append(f"    {button}")
    return lines

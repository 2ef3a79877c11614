import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from larder.logic.shopping.views import to_buy, checked
from larder.utilities.constants import PDF_TITLE


def generate_pdf_for_shopping(items, title: str = PDF_TITLE) -> bytes:
    """Generate a printable table: Item / Quantity / Status, unchecked items first."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]

    pending = to_buy(items)
    done = checked(items)
    if not pending and not done:
        elements.append(Paragraph("Nothing to buy.", styles["Normal"]))
        doc.build(elements)
        return buf.getvalue()

    data = [["Item", "Quantity", "Status"]]
    for item in pending:
        data.append([item.name, str(item.quantity), "To buy"])
    for item in done:
        data.append([item.name, str(item.quantity), "Checked"])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    if done:
        table.setStyle(TableStyle([("TEXTCOLOR", (0, len(pending) + 1), (-1, -1), colors.grey)]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()

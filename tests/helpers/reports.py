"""Builders for synthetic self-service and attendant report documents.

Documents mimic the real exports: a preamble with operator/period lines, a
header row, data rows with quoted comma-decimal currency, blank delimiter-only
lines and a ``Total`` footer.
"""

from __future__ import annotations

SELF_SERVICE_HEADER = (
    "Loja,Venda,Cupom,Qtd,Pagamento,Cartao,Produtos,Preco,Desconto,Total Venda,Data,Hora"
)
ATTENDANT_HEADER = (
    "Cliente,CNPJ,Cidade,Terminal,Nome Terminal,Pagamento,Bandeira,Qtd,"
    "Venda (R$),Taxa,Liquido,Status,Data,Hora"
)


def self_service_row(
    machine: str, amount: str, date: str, time: str, payment: str = "Pix", *, seq: int = 1
) -> str:
    fields = [
        str(seq),
        str(1000 + seq),
        str(50 + seq),
        "1",
        payment,
        "",
        machine,
        f'"{amount}"',
        "0",
        f'"R$ {amount}"',
        date,
        time,
    ]
    return ",".join(fields)


def attendant_row(
    unit: str, machine: str, amount: str, date: str, time: str, payment: str = "Credito"
) -> str:
    fields = [
        unit,
        "00.000.000/0001-00",
        "Curitiba",
        "T14",
        machine,
        payment,
        "Visa",
        "1",
        f'"{amount}"',
        '"0,50"',
        f'"{amount}"',
        "Aprovada",
        date,
        time,
    ]
    return ",".join(fields)


def self_service_document(rows: list[str], *, operator: str = "LAVANDERIA CENTRO") -> str:
    lines = [
        "Relatorio de Vendas Self Service,,,,",
        f"Operador:,{operator},,,",
        "Vendas de 01/05/2024 ate 31/05/2024,,,,",
        ",,,,,,,,,,,",
        SELF_SERVICE_HEADER,
        *rows,
        ",,,,,,,,,,,",
        'Total,,,,,,,,,"R$ 0,00",,',
    ]
    return "\r\n".join(lines) + "\r\n"


def attendant_document(rows: list[str]) -> str:
    lines = [
        "Relatorio Atendente",
        "Vendas de 01/05/2024 ate 31/05/2024",
        "",
        ATTENDANT_HEADER,
        *rows,
        "",
        "Total,,,,,,,,\"37,50\",,,,,",
    ]
    return "\n".join(lines)


SELF_SERVICE_ROWS = [
    self_service_row("4 - LAVA - 04", "15,90", "04/05/2024", "08:15:30", "Pix", seq=1),
    self_service_row("SECA - 09", "18,00", "05/05/2024", "14:02:00", "Credito", seq=2),
    self_service_row("LAVA E SECA - 02", "1.234,56", "06/05/2024", "23:59", "Debito", seq=3),
]

ATTENDANT_ROWS = [
    attendant_row("LAVANDERIA SUL", "LAVA - 14", "17,50", "10/05/2024", "09:00:00"),
    attendant_row("LAVANDERIA SUL", "SECA - 03", "20,00", "11/05/2024", "", payment="Pix"),
]

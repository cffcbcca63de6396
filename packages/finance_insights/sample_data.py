"""Bundled demo statement: three months, 34 transactions, comma-delimited."""

from __future__ import annotations

SAMPLE_CSV = """Data,Descricao,Valor
01/01/2025,Salario,5500.00
03/01/2025,Supermercado Extra,-450.30
05/01/2025,Uber,-35.90
07/01/2025,Netflix,-55.90
10/01/2025,Aluguel,-1800.00
12/01/2025,Conta de Luz,-180.50
15/01/2025,Farmacia Popular,-89.00
18/01/2025,Curso Udemy,-47.90
20/01/2025,Cinema,-32.00
22/01/2025,Restaurante Italiano,-95.00
25/01/2025,Gasolina,-200.00
28/01/2025,Freelance,1200.00
01/02/2025,Salario,5500.00
03/02/2025,Mercado Dia,-380.00
05/02/2025,99 Taxi,-28.50
08/02/2025,Condominio,-650.00
10/02/2025,Aluguel,-1800.00
12/02/2025,Internet,-120.00
15/02/2025,Plano de Saude,-450.00
18/02/2025,Padaria,-25.00
20/02/2025,Spotify,-21.90
22/02/2025,Supermercado Pao de Acucar,-520.00
25/02/2025,Estacionamento,-15.00
28/02/2025,Pix Recebido,800.00
01/03/2025,Salario,5500.00
04/03/2025,Acougue,-150.00
06/03/2025,Uber,-42.00
09/03/2025,Energia,-195.00
12/03/2025,Aluguel,-1800.00
15/03/2025,Escola Ingles,-350.00
18/03/2025,Viagem Praia,-1200.00
20/03/2025,Lanchonete,-18.00
23/03/2025,Telefone Celular,-79.90
25/03/2025,Mercado,-410.00"""

__all__ = ["SAMPLE_CSV"]

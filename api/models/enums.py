# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the CondoFlow platform.

Values are the Portuguese codes used on the wire and in storage.
"""

from enum import Enum


class UserRole(str, Enum):
    """Back-office user roles."""
    ADMIN = "ADMIN"
    GESTOR = "GESTOR"
    COLABORADOR = "COLABORADOR"


class RiskLevel(str, Enum):
    """Condominium risk level."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class PaymentStatus(str, Enum):
    """Fraction payment standing."""
    EM_DIA = "EM_DIA"
    ATRASO = "ATRASO"
    CRITICO = "CRITICO"


class FractionTypology(str, Enum):
    """Fraction typology (number of bedrooms)."""
    T0 = "T0"
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"
    T4 = "T4"
    T5 = "T5"
    OUTRO = "OUTRO"


class FractionOccupation(str, Enum):
    """Who occupies a fraction."""
    PROPRIETARIO = "PROPRIETARIO"
    ARRENDADA = "ARRENDADA"
    DESCONHECIDO = "DESCONHECIDO"


class OccurrenceStatus(str, Enum):
    """Occurrence workflow status."""
    ABERTA = "ABERTA"
    EM_ANALISE = "EM_ANALISE"
    EM_EXECUCAO = "EM_EXECUCAO"
    RESOLVIDA = "RESOLVIDA"
    ARQUIVADA = "ARQUIVADA"


class OccurrencePriority(str, Enum):
    """Occurrence priority."""
    NORMAL = "NORMAL"
    URGENTE = "URGENTE"


class OccurrenceCategory(str, Enum):
    """Occurrence category."""
    INFILTRACAO = "INFILTRACAO"
    ELEVADOR = "ELEVADOR"
    LIMPEZA = "LIMPEZA"
    ELETRICIDADE = "ELETRICIDADE"
    CANALIZACAO = "CANALIZACAO"
    AQUECIMENTO = "AQUECIMENTO"
    SEGURANCA = "SEGURANCA"
    OUTRO = "OUTRO"


class AssemblyStatus(str, Enum):
    """General assembly status."""
    NAO_MARCADA = "NAO_MARCADA"
    AGENDADA = "AGENDADA"
    REALIZADA = "REALIZADA"
    CANCELADA = "CANCELADA"


class AssemblyType(str, Enum):
    """Ordinary (AGO) or extraordinary (AGE) assembly."""
    AGO = "AGO"
    AGE = "AGE"


class ProjectStatus(str, Enum):
    """Project lifecycle status."""
    PLANEAMENTO = "PLANEAMENTO"
    EM_APROVACAO = "EM_APROVACAO"
    APROVADO = "APROVADO"
    EM_EXECUCAO = "EM_EXECUCAO"
    CONCLUIDO = "CONCLUIDO"
    CANCELADO = "CANCELADO"


class TransactionType(str, Enum):
    """Income or expense."""
    RECEITA = "RECEITA"
    DESPESA = "DESPESA"


class TransactionCategory(str, Enum):
    """Transaction category."""
    QUOTA = "QUOTA"
    FUNDO_RESERVA = "FUNDO_RESERVA"
    MANUTENCAO = "MANUTENCAO"
    LIMPEZA = "LIMPEZA"
    SEGURO = "SEGURO"
    AGUA = "AGUA"
    ELETRICIDADE = "ELETRICIDADE"
    GAS = "GAS"
    ELEVADOR = "ELEVADOR"
    OBRA = "OBRA"
    OUTRO = "OUTRO"


class PaymentMethod(str, Enum):
    """How a transaction was paid."""
    TRANSFERENCIA = "TRANSFERENCIA"
    MULTIBANCO = "MULTIBANCO"
    DINHEIRO = "DINHEIRO"
    DEBITO_DIRETO = "DEBITO_DIRETO"


class TransactionStatus(str, Enum):
    """Transaction status."""
    NORMAL = "NORMAL"
    REEMBOLSADO = "REEMBOLSADO"
    ANULADO = "ANULADO"
    PENDENTE = "PENDENTE"


class DocumentCategory(str, Enum):
    """Document category."""
    ATA = "ATA"
    CONTRATO = "CONTRATO"
    FATURA = "FATURA"
    SEGURO = "SEGURO"
    OUTROS = "OUTROS"


class ContactRole(str, Enum):
    """Role of a condominium contact."""
    GESTOR = "GESTOR"
    ADMINISTRADOR = "ADMINISTRADOR"
    CONSELHO_CONSULTIVO = "CONSELHO_CONSULTIVO"
    FORNECEDOR_CHAVE = "FORNECEDOR_CHAVE"
    OUTRO = "OUTRO"


class SortOrder(str, Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"


class PriorityType(str, Enum):
    """Source of a dashboard priority item."""
    SLA = "sla"
    PAYMENT = "payment"
    ASSEMBLY = "assembly"


class Urgency(str, Enum):
    """Urgency of a dashboard priority item."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

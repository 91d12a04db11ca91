"""
월간 MIS 운영 보고서 모델입니다.

하나의 보고서는 8개 섹션으로 구성됩니다:
1. it_operations: 애플리케이션/인프라 가동률, 티켓 현황
2. cybersecurity: 보안 사고, 패치, 백업 현황
3. projects: 진행/신규/지연/완료 프로젝트
4. system_usage: 시스템 사용률, 라이선스, 교육
5. automation: 자동화 과제와 절감 효과
6. budget: 예산 대비 실적
7. risks: 주요 리스크, 의존성, 컴플라이언스
8. roadmap: 업그레이드, 점검, 교육, 구매 계획

모든 필드는 기본값을 가지므로 ``MonthlyReport()`` 한 번으로 완전히 채워진 보고서가 만들어집니다.
수치 범위(음수, 100 초과 비율 등)는 검증하지 않습니다.
"""

from enum import Enum
from pydantic import BaseModel, Field


SECTION_KEYS = (
    "it_operations",
    "cybersecurity",
    "projects",
    "system_usage",
    "automation",
    "budget",
    "risks",
    "roadmap",
)


class RAGStatus(str, Enum):
    """프로젝트 건강도 (Red/Amber/Green)."""

    GREEN = "green"
    AMBER = "amber"
    RED = "red"


# ==================== IT 운영 ====================

class UptimeStatus(BaseModel):
    uptime: float = 0.0
    status: str = "operational"


class TicketMetrics(BaseModel):
    total: int = 45
    resolved: int = 38
    pending: int = 7
    sla_adherence: float = 92


class RecurringIssue(BaseModel):
    issue: str = ""
    root_cause: str = ""
    action: str = ""


def _default_applications() -> dict[str, UptimeStatus]:
    return {
        "erp": UptimeStatus(uptime=99.8, status="operational"),
        "crm": UptimeStatus(uptime=99.5, status="operational"),
        "portal": UptimeStatus(uptime=98.9, status="maintenance"),
    }


def _default_infrastructure() -> dict[str, UptimeStatus]:
    return {
        "servers": UptimeStatus(uptime=99.9, status="operational"),
        "network": UptimeStatus(uptime=99.7, status="operational"),
        "vpn": UptimeStatus(uptime=99.2, status="operational"),
    }


class ITOperations(BaseModel):
    applications: dict[str, UptimeStatus] = Field(default_factory=_default_applications)
    infrastructure: dict[str, UptimeStatus] = Field(default_factory=_default_infrastructure)
    tickets: TicketMetrics = Field(default_factory=TicketMetrics)
    recurring_issues: list[RecurringIssue] = Field(default_factory=list)


# ==================== 사이버 보안 ====================

class IncidentMetrics(BaseModel):
    total: int = 2
    resolved: int = 2
    pending: int = 0


class SecuritySystem(BaseModel):
    status: str = ""
    last_update: str = ""


class PatchStatus(BaseModel):
    completion: float = 0
    pending: int = 0


class BackupMetrics(BaseModel):
    success: int = 28
    failure: int = 2
    success_rate: float = 93


class AccessReview(BaseModel):
    department: str = ""
    last_review: str = ""
    findings: str = ""


def _default_security_systems() -> dict[str, SecuritySystem]:
    return {
        "antivirus": SecuritySystem(status="up-to-date", last_update="2024-01-20"),
        "firewall": SecuritySystem(status="active", last_update="2024-01-18"),
        "intrusion": SecuritySystem(status="active", last_update="2024-01-19"),
    }


def _default_patches() -> dict[str, PatchStatus]:
    return {
        "os": PatchStatus(completion=95, pending=3),
        "apps": PatchStatus(completion=88, pending=12),
        "firmware": PatchStatus(completion=92, pending=5),
    }


class Cybersecurity(BaseModel):
    incidents: IncidentMetrics = Field(default_factory=IncidentMetrics)
    systems: dict[str, SecuritySystem] = Field(default_factory=_default_security_systems)
    patches: dict[str, PatchStatus] = Field(default_factory=_default_patches)
    backups: BackupMetrics = Field(default_factory=BackupMetrics)
    user_access_reviews: list[AccessReview] = Field(default_factory=list)


# ==================== 프로젝트 ====================

class OngoingProject(BaseModel):
    id: str = ""
    name: str = ""
    status: RAGStatus = RAGStatus.GREEN
    progress: float = 0
    department: str = ""
    budget: float = 0
    timeline: str = ""


class NewInitiative(BaseModel):
    name: str = ""
    kickoff: str = ""
    department: str = ""
    budget: float = 0


class ProjectDelay(BaseModel):
    project: str = ""
    reason: str = ""
    mitigation: str = ""
    impact: str = ""


class CompletedProject(BaseModel):
    name: str = ""
    impact: str = ""
    completion_date: str = ""
    budget: float = 0


class Projects(BaseModel):
    ongoing: list[OngoingProject] = Field(default_factory=list)
    new_initiatives: list[NewInitiative] = Field(default_factory=list)
    delays: list[ProjectDelay] = Field(default_factory=list)
    completed: list[CompletedProject] = Field(default_factory=list)


# ==================== 시스템 사용 ====================

class ApplicationUsage(BaseModel):
    active_users: int = 0
    total_users: int = 0
    usage: float = 0


class LicenseUsage(BaseModel):
    used: int = 0
    available: int = 0
    utilization: float = 0
    cost: float = 0


class TrainingMetrics(BaseModel):
    conducted: int = 8
    planned: int = 12
    attendees: int = 145
    feedback: float = 4.2


class UserFeedback(BaseModel):
    system: str = ""
    issue: str = ""
    status: str = ""
    priority: str = ""


def _default_usage() -> dict[str, ApplicationUsage]:
    return {
        "erp": ApplicationUsage(active_users=450, total_users=500, usage=90),
        "crm": ApplicationUsage(active_users=280, total_users=320, usage=87.5),
        "portal": ApplicationUsage(active_users=180, total_users=250, usage=72),
    }


def _default_licenses() -> dict[str, LicenseUsage]:
    return {
        "office365": LicenseUsage(used=480, available=500, utilization=96, cost=15000),
        "adobe": LicenseUsage(used=25, available=30, utilization=83, cost=2500),
        "project": LicenseUsage(used=15, available=20, utilization=75, cost=1200),
    }


class SystemUsage(BaseModel):
    applications: dict[str, ApplicationUsage] = Field(default_factory=_default_usage)
    licenses: dict[str, LicenseUsage] = Field(default_factory=_default_licenses)
    training: TrainingMetrics = Field(default_factory=TrainingMetrics)
    feedback: list[UserFeedback] = Field(default_factory=list)


# ==================== 자동화 ====================

class AutomationInitiative(BaseModel):
    name: str = ""
    type: str = ""
    status: str = ""
    time_saved: str = ""
    cost_saved: float = 0


class AutomationSavings(BaseModel):
    total_time_saved: float = 320
    cost_saved: float = 24000
    processes: int = 12


class AIMLProject(BaseModel):
    name: str = ""
    status: str = ""
    impact: str = ""
    roi: str = ""


class AutomationSuggestion(BaseModel):
    idea: str = ""
    priority: str = ""
    estimated_savings: str = ""
    feasibility: str = ""


class Automation(BaseModel):
    initiatives: list[AutomationInitiative] = Field(default_factory=list)
    savings: AutomationSavings = Field(default_factory=AutomationSavings)
    ai_ml: list[AIMLProject] = Field(default_factory=list)
    suggestions: list[AutomationSuggestion] = Field(default_factory=list)


# ==================== 예산 ====================

class BudgetLine(BaseModel):
    budget: float = 0
    actual: float = 0
    variance: float = 0


class MonthlyBudget(BaseModel):
    opex: BudgetLine = Field(
        default_factory=lambda: BudgetLine(budget=150000, actual=142000, variance=-8000)
    )
    capex: BudgetLine = Field(
        default_factory=lambda: BudgetLine(budget=200000, actual=185000, variance=-15000)
    )


class MajorPurchase(BaseModel):
    item: str = ""
    amount: float = 0
    date: str = ""
    status: str = ""
    vendor: str = ""


class BudgetForecast(BaseModel):
    next_month: float = 320000
    next_quarter: float = 980000
    risk_factors: list[str] = Field(default_factory=list)


class Budget(BaseModel):
    monthly: MonthlyBudget = Field(default_factory=MonthlyBudget)
    major_purchases: list[MajorPurchase] = Field(default_factory=list)
    forecast: BudgetForecast = Field(default_factory=BudgetForecast)


# ==================== 리스크 ====================

class MajorRisk(BaseModel):
    risk: str = ""
    severity: str = ""
    mitigation: str = ""
    owner: str = ""
    due_date: str = ""


class Dependency(BaseModel):
    item: str = ""
    depends_on: str = ""
    status: str = ""
    eta: str = ""
    impact: str = ""


class ComplianceItem(BaseModel):
    area: str = ""
    status: str = ""
    last_audit: str = ""
    next_review: str = ""
    findings: str = ""


class Risks(BaseModel):
    major_risks: list[MajorRisk] = Field(default_factory=list)
    dependencies: list[Dependency] = Field(default_factory=list)
    compliance: list[ComplianceItem] = Field(default_factory=list)


# ==================== 로드맵 ====================

class PlannedUpgrade(BaseModel):
    name: str = ""
    date: str = ""
    impact: str = ""
    type: str = ""
    responsible: str = ""


class MaintenanceWindow(BaseModel):
    system: str = ""
    date: str = ""
    duration: str = ""
    window: str = ""
    impact: str = ""


class TrainingPlan(BaseModel):
    program: str = ""
    date: str = ""
    audience: str = ""
    trainer: str = ""
    budget: float = 0


class ProcurementPlan(BaseModel):
    item: str = ""
    timeline: str = ""
    budget: str = ""
    status: str = ""
    priority: str = ""


class Roadmap(BaseModel):
    upgrades: list[PlannedUpgrade] = Field(default_factory=list)
    maintenance: list[MaintenanceWindow] = Field(default_factory=list)
    training: list[TrainingPlan] = Field(default_factory=list)
    procurement: list[ProcurementPlan] = Field(default_factory=list)


# ==================== 월간 보고서 ====================

class MonthlyReport(BaseModel):
    """한 달치 MIS 보고서 스냅샷입니다."""

    it_operations: ITOperations = Field(default_factory=ITOperations)
    cybersecurity: Cybersecurity = Field(default_factory=Cybersecurity)
    projects: Projects = Field(default_factory=Projects)
    system_usage: SystemUsage = Field(default_factory=SystemUsage)
    automation: Automation = Field(default_factory=Automation)
    budget: Budget = Field(default_factory=Budget)
    risks: Risks = Field(default_factory=Risks)
    roadmap: Roadmap = Field(default_factory=Roadmap)


class MonthOption(BaseModel):
    """월 선택 목록 항목 (예: key="2026-01", label="January 2026")."""

    key: str
    label: str

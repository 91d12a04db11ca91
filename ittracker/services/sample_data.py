"""
샘플 요청 데이터입니다.
서버 시작 시 settings.load_sample_data가 켜져 있으면 요청 저장소에 적재됩니다.
"""

from datetime import date

from ittracker.models import (
    Stage,
    Priority,
    ApprovalStatus,
    TestStatus,
    UATStatus,
    Environment,
    FinalStatus,
    DevelopmentRequest,
)


def sample_requests() -> list[DevelopmentRequest]:
    """단계가 골고루 분포된 샘플 요청 12건 (REQ-001 ~ REQ-012)."""
    return [
        DevelopmentRequest(
            id="REQ-001",
            title="User Authentication Enhancement",
            request_date=date(2024, 4, 15),
            requested_by="John Smith",
            department="Security",
            priority=Priority.HIGH,
            business_justification="Improve security and user experience with multi-factor authentication",
            related_module="Authentication System",
            current_stage=Stage.COMPLETED,
            status="Completed",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 4, 20),
            assigned_developer="Alice Johnson",
            start_date=date(2024, 4, 25),
            test_start_date=date(2024, 5, 10),
            test_completion_date=date(2024, 5, 15),
            test_status=TestStatus.PASS,
            uat_status=UATStatus.ACCEPTED,
            uat_completion_date=date(2024, 5, 20),
            deployment_date=date(2024, 5, 25),
            environment=Environment.PROD,
            close_date=date(2024, 5, 30),
            final_status=FinalStatus.CLOSED,
        ),
        DevelopmentRequest(
            id="REQ-002",
            title="Inventory Management Bug Fix",
            request_date=date(2024, 5, 5),
            requested_by="Sarah Wilson",
            department="Operations",
            priority=Priority.MEDIUM,
            business_justification="Fix critical inventory calculation errors affecting stock reports",
            related_module="Inventory System",
            current_stage=Stage.TESTING,
            status="Testing Phase",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 5, 8),
            assigned_developer="Bob Martinez",
            start_date=date(2024, 5, 12),
            test_start_date=date(2024, 5, 28),
            test_status=TestStatus.PASS,
        ),
        DevelopmentRequest(
            id="REQ-003",
            title="Customer Portal Mobile Optimization",
            request_date=date(2024, 6, 1),
            requested_by="Mike Chen",
            department="Customer Service",
            priority=Priority.HIGH,
            business_justification="Optimize customer portal for mobile devices to improve user experience",
            related_module="Customer Portal",
            current_stage=Stage.DEVELOPMENT,
            status="In Development",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 6, 5),
            assigned_developer="Emma Davis",
            start_date=date(2024, 6, 10),
        ),
        DevelopmentRequest(
            id="REQ-004",
            title="Payroll System Integration",
            request_date=date(2024, 7, 10),
            requested_by="Lisa Rodriguez",
            department="HR",
            priority=Priority.URGENT,
            business_justification="Integrate new payroll system with existing HR management platform",
            related_module="HR System",
            current_stage=Stage.ANALYSIS,
            status="Under Analysis",
            approval_status=ApprovalStatus.PENDING,
        ),
        DevelopmentRequest(
            id="REQ-005",
            title="Financial Reporting Dashboard",
            request_date=date(2024, 8, 15),
            requested_by="David Thompson",
            department="Finance",
            priority=Priority.MEDIUM,
            business_justification="Create comprehensive dashboard for financial KPI tracking",
            related_module="Financial System",
            current_stage=Stage.REQUIREMENT_GATHERING,
            status="Requirements Gathering",
            approval_status=ApprovalStatus.PENDING,
        ),
        DevelopmentRequest(
            id="REQ-006",
            title="Supply Chain Analytics",
            request_date=date(2024, 9, 3),
            requested_by="Jennifer Lee",
            department="Supply Chain",
            priority=Priority.LOW,
            business_justification="Implement analytics for supply chain optimization",
            related_module="Supply Chain System",
            current_stage=Stage.APPROVAL,
            status="Awaiting Approval",
            approval_status=ApprovalStatus.ON_HOLD,
        ),
        DevelopmentRequest(
            id="REQ-007",
            title="Email Notification System",
            request_date=date(2024, 10, 12),
            requested_by="Robert Garcia",
            department="IT",
            priority=Priority.MEDIUM,
            business_justification="Automated email notifications for system alerts and updates",
            related_module="Notification System",
            current_stage=Stage.UAT,
            status="User Acceptance Testing",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 10, 15),
            assigned_developer="Sarah Kim",
            start_date=date(2024, 10, 20),
            test_start_date=date(2024, 11, 1),
            test_status=TestStatus.PASS,
            uat_status=UATStatus.CHANGES_REQUIRED,
        ),
        DevelopmentRequest(
            id="REQ-008",
            title="Data Backup Automation",
            request_date=date(2024, 11, 8),
            requested_by="Kevin Park",
            department="IT",
            priority=Priority.HIGH,
            business_justification="Automate daily data backups to ensure business continuity",
            related_module="Backup System",
            current_stage=Stage.DEPLOYMENT,
            status="Ready for Deployment",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 11, 10),
            assigned_developer="Tom Wilson",
            start_date=date(2024, 11, 15),
            test_start_date=date(2024, 11, 25),
            test_status=TestStatus.PASS,
            uat_status=UATStatus.ACCEPTED,
            uat_completion_date=date(2024, 12, 1),
            deployment_date=date(2024, 12, 5),
            environment=Environment.UAT,
        ),
        DevelopmentRequest(
            id="REQ-009",
            title="Performance Monitoring Tool",
            request_date=date(2024, 12, 1),
            requested_by="Amy Foster",
            department="Operations",
            priority=Priority.MEDIUM,
            business_justification="Monitor application performance and identify bottlenecks",
            related_module="Monitoring System",
            current_stage=Stage.DEVELOPMENT,
            status="In Development",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 12, 3),
            assigned_developer="Chris Brown",
            start_date=date(2024, 12, 8),
        ),
        DevelopmentRequest(
            id="REQ-010",
            title="Customer Feedback Portal",
            request_date=date(2025, 1, 15),
            requested_by="Nancy White",
            department="Customer Service",
            priority=Priority.LOW,
            business_justification="Centralized portal for collecting and managing customer feedback",
            related_module="Customer Portal",
            current_stage=Stage.REQUIREMENT_GATHERING,
            status="Requirements Gathering",
            approval_status=ApprovalStatus.PENDING,
        ),
        DevelopmentRequest(
            id="REQ-011",
            title="Vendor Management System",
            request_date=date(2025, 2, 20),
            requested_by="Mark Johnson",
            department="Procurement",
            priority=Priority.HIGH,
            business_justification="Streamline vendor onboarding and management processes",
            related_module="Vendor System",
            current_stage=Stage.ANALYSIS,
            status="Under Analysis",
            approval_status=ApprovalStatus.PENDING,
        ),
        DevelopmentRequest(
            id="REQ-012",
            title="Training Management Platform",
            request_date=date(2025, 3, 10),
            requested_by="Rachel Green",
            department="HR",
            priority=Priority.MEDIUM,
            business_justification="Digital platform for employee training and certification tracking",
            related_module="Training System",
            current_stage=Stage.APPROVAL,
            status="Awaiting Approval",
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2025, 3, 15),
        ),
    ]

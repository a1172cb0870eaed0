"""
Bank tool registry.

register_tools() binds the nine mock bank tools to a FastMCP server. Input
schemas come from the annotated signatures, so FastMCP rejects malformed
arguments before any handler body runs. Parameter names are the wire names.
"""

from typing import Annotated, Literal

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field, StrictBool

from ai_bank_tool import __version__, config
from ai_bank_tool.auth.service import AuthService
from ai_bank_tool.common.results import mk_result
from ai_bank_tool.common.tool_logging import ToolLoggingMiddleware
from ai_bank_tool.risk.service import RiskService
from ai_bank_tool.term_deposit.service import TermDepositService
from ai_bank_tool.transfer.service import TransferService

# Strict: strings and booleans are not coerced to numbers
PositiveInt = Annotated[int, Field(strict=True, gt=0)]

DeviceType = Literal["paper_card", "hardware_token", "smartphone_app"]

TOOL_NAMES = (
    "otp_device_check",
    "pre_transfer_prep",
    "review_transfer",
    "threatmetrix_risk",
    "obtain_second_password",
    "execute_transfer",
    "update_high_risk_auth_status",
    "term_deposit_prep",
    "apply_term_deposit",
)


def register_tools(mcp: FastMCP) -> None:
    transfers = TransferService()
    auth = AuthService()
    risk = RiskService()
    term_deposits = TermDepositService()

    # 1) OTP device type check (paper cards cannot transfer)
    @mcp.tool(
        name="otp_device_check",
        title="OTPデバイス種別確認",
        description=(
            "振り込みできる条件かどうかを確認します。お客様が紙のご利用カードを利用している場合は利用可能ではありません。"
            "入力はユーザーID、出力は利用可能なら true、不可なら false を返します。"
        ),
    )
    async def otp_device_check(userId: str, deviceType: DeviceType | None = None) -> ToolResult:  # noqa: N803
        return mk_result(await transfers.check_otp_device(userId, deviceType))

    # 2) Transfer prep: payees, source accounts, limits and fees
    @mcp.tool(
        name="pre_transfer_prep",
        title="振込事前処理",
        description=(
            "振り込み事前処理を確認するためにユーザーの各種情報を返します。"
            "登録振込先・出金口座・限度額/手数料を返します。インプットはユーザーIDです。"
        ),
    )
    async def pre_transfer_prep(userId: str) -> ToolResult:  # noqa: N803
        return mk_result(await transfers.prepare(userId))

    # 3) Transfer review: balance / limit / fee check
    @mcp.tool(
        name="review_transfer",
        title="振込内容照会",
        description=(
            "ユーザーID・出金口座情報・振込先を入力として、残高・限度額・手数料の最終チェックを行い、"
            "確認した内容をそのまま応答します（モック）。"
        ),
    )
    async def review_transfer(
        userId: str,  # noqa: N803
        fromAccountId: str,  # noqa: N803
        toPayeeId: str,  # noqa: N803
        amountJPY: PositiveInt | None = None,  # noqa: N803
    ) -> ToolResult:
        return mk_result(await transfers.review(userId, fromAccountId, toPayeeId, amountJPY))

    # 4) ThreatMetrix risk: 低 / 中 / 高
    @mcp.tool(
        name="threatmetrix_risk",
        title="ThreatMetrixリスク判定",
        description="ユーザーID（任意のセッションIDと併用可）を基に端末・行動シグナルを評価し、低/中/高のリスク評価を返します。",
    )
    async def threatmetrix_risk(userId: str, sessionId: str | None = None) -> ToolResult:  # noqa: N803
        return mk_result(await risk.evaluate(userId, sessionId))

    # 5) Second password via in-app approval
    @mcp.tool(
        name="obtain_second_password",
        title="第2暗証取得",
        description="ユーザーIDを基に第2暗証の承認フローを開始し、端末側承認後のトークンを返します。",
    )
    async def obtain_second_password(userId: str, authRequestId: str | None = None) -> ToolResult:  # noqa: N803, ARG001
        return mk_result(await auth.obtain_second_password(userId))

    # 6) Transfer execution
    @mcp.tool(
        name="execute_transfer",
        title="振込実行",
        description=(
            "ユーザーID・出金口座・振込先・金額（および必要に応じて第2暗証トークン/OTP）を受け取り、"
            "送金実行結果を返します。"
        ),
    )
    async def execute_transfer(
        userId: str,  # noqa: N803
        fromAccountId: str,  # noqa: N803
        toPayeeId: str,  # noqa: N803
        amountJPY: PositiveInt,  # noqa: N803
        secondPasswordToken: str | None = None,  # noqa: N803, ARG001
        otpCode: str | None = None,  # noqa: N803, ARG001
        idempotencyKey: str | None = None,  # noqa: N803, ARG001
    ) -> ToolResult:
        # idempotencyKey is accepted but not deduplicated
        return mk_result(await transfers.execute(userId, fromAccountId, toPayeeId, amountJPY))

    # 7) High-risk history: auth status update from e-mail OTP result
    @mcp.tool(
        name="update_high_risk_auth_status",
        title="高リスク履歴の認証ステータス更新",
        description="ユーザーIDとケースIDを指定して、メールOTP等の照合結果に基づく認証ステータスを更新します。",
    )
    async def update_high_risk_auth_status(userId: str, caseId: str, otpVerified: StrictBool) -> ToolResult:  # noqa: N803
        return mk_result(await auth.update_high_risk_status(userId, caseId, otpVerified))

    # 8) Term deposit pre-check: balance, product terms, risk
    @mcp.tool(
        name="term_deposit_prep",
        title="定期移管事前処理",
        description=(
            "ユーザーID・出金口座・金額（任意の商品/期間指定を含む）を基に、"
            "残高・商品条件・リスク観点の事前チェック結果を返します。"
        ),
    )
    async def term_deposit_prep(
        userId: str,  # noqa: N803
        fromAccountId: str,  # noqa: N803
        amountJPY: PositiveInt,  # noqa: N803
        termMonths: PositiveInt | None = None,  # noqa: N803
        productCode: str | None = None,  # noqa: N803
    ) -> ToolResult:
        return mk_result(
            await term_deposits.prepare(userId, fromAccountId, amountJPY, termMonths, productCode)
        )

    # 9) Term deposit application
    @mcp.tool(
        name="apply_term_deposit",
        title="定期預金申込",
        description="ユーザーID・出金口座・金額・期間等の条件を入力として、定期預金の申込結果を返します。",
    )
    async def apply_term_deposit(
        userId: str,  # noqa: N803
        fromAccountId: str,  # noqa: N803
        amountJPY: PositiveInt,  # noqa: N803
        termMonths: PositiveInt,  # noqa: N803
        productCode: str | None = None,  # noqa: N803
        handling: Annotated[str | None, Field(description="満期取扱い")] = None,
        idempotencyKey: str | None = None,  # noqa: N803, ARG001
    ) -> ToolResult:
        return mk_result(
            await term_deposits.apply(
                userId,
                fromAccountId,
                amountJPY,
                termMonths,
                product_code=productCode,
                handling=handling,
            )
        )


def create_server(tool_logging: bool = False) -> FastMCP:
    """
    Build a FastMCP server with every bank tool registered.

    tool_logging adds per-call start/ok/error log lines (HTTP variant).
    """
    mcp = FastMCP(
        name=config.SERVER_NAME,
        version=__version__,
        strict_input_validation=True,
    )
    register_tools(mcp)
    if tool_logging:
        mcp.add_middleware(ToolLoggingMiddleware())
    return mcp

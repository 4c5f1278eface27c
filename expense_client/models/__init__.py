"""Public models for the expense client."""

from expense_client.models.requests import (
    AccountCreate,
    AccountUpdate,
    BudgetCreate,
    BudgetUpdate,
    CategoryCreate,
    CategoryQuery,
    CategoryUpdate,
    ExpenseCreate,
    ExpenseQuery,
    ExpenseSummaryQuery,
    ExpenseUpdate,
    LoginCredentials,
    PageParams,
    RecurringCreate,
    RecurringInterval,
    RecurringUpdate,
    RegisterData,
    TagCreate,
    TagUpdate,
)
from expense_client.models.responses import ApiResult, Page, ServerEnvelope
from expense_client.models.schemas import (
    Account,
    AuthToken,
    Budget,
    BudgetOverview,
    BudgetState,
    BudgetStatus,
    Category,
    Expense,
    ExpenseSummary,
    GeneratedExpenses,
    RecurringExpense,
    Tag,
    UpcomingRecurring,
    User,
)

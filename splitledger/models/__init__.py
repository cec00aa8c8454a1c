# import ALL models here so Base.metadata sees every table
from splitledger.models.group import Group
from splitledger.models.group_member import GroupMember
from splitledger.models.expense import Expense
from splitledger.models.expense_participant import ExpenseParticipant
from splitledger.models.settlement_history import SettlementHistory

from .rent import BalanceChangeFilter, RentRefundFilter, filter_rent_noise, is_rent_noise

__all__ = ["BalanceChangeFilter", "RentRefundFilter", "filter_rent_noise", "is_rent_noise"]

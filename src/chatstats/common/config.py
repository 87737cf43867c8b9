import os
from glob import glob
from typing import List

from chatstats.common.agg.gaps import EvictionPolicy


class Config:
    def __init__(self, args):
        # Data source configurations
        self.source_type = args.source_type
        self.database = args.database
        self.contact = args.contact
        self.input_files = Config.__prepare_input_files(args.input_files)

        # CSV field configurations
        self.date_field = args.date_field
        self.from_me_field = args.from_me_field
        self.text_field = args.text_field
        self.date_format = args.date_format

        # Output configurations
        self.transcript_file = args.transcript_file
        self.no_transcript = args.no_transcript
        self.output_file = args.output_file
        self.your_name = args.your_name
        self.their_name = args.their_name

        # Aggregation options
        self.first_year = args.first_year
        self.last_year = args.last_year
        if self.first_year > self.last_year:
            raise ValueError(f"First year {self.first_year} is after last year {self.last_year}.")
        self.heap_levels = args.heap_levels
        self.eviction_policy = EvictionPolicy.EXACT if args.exact_top_k else EvictionPolicy.LEAF
        self.exact_messages = Config.__prepare_phrases(args.exact_messages)
        self.substr_messages = Config.__prepare_phrases(args.substr_messages)

    @property
    def capacity(self) -> int:
        return (1 << self.heap_levels) - 1

    @staticmethod
    def __prepare_input_files(input_files: List[str]):
        file_names = []
        for f in input_files or []:
            file_names += glob(f)
        file_names = set(file_names)
        # Sorted so multi-file exports are read oldest file first when named by date
        return sorted(file for file in file_names if os.path.isfile(file))

    @staticmethod
    def __prepare_phrases(phrases: List[str]):
        # Remove duplicates, keep the order given
        return list(dict.fromkeys(phrases))

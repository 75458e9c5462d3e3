from django.db import migrations, models


def _extra_file_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('media_item_id', models.PositiveBigIntegerField(db_index=True, help_text='Owning media item')),
        ('media_file_id', models.PositiveBigIntegerField(blank=True, db_index=True, help_text='Owning media file, empty when attached to the item', null=True)),
        ('relative_path', models.CharField(help_text='Path relative to the media item root directory', max_length=1024)),
        ('extension', models.CharField(blank=True, default='', max_length=32)),
        ('added', models.DateTimeField(blank=True, null=True)),
        ('last_updated', models.DateTimeField(blank=True, null=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SubtitleFile',
            fields=[
                *_extra_file_fields(),
                ('language', models.CharField(blank=True, default='', max_length=64)),
                ('language_tags', models.CharField(blank=True, default='', help_text='Comma separated tags, e.g. "forced,sdh"', max_length=64)),
            ],
            options={
                'verbose_name': 'Subtitle File',
                'verbose_name_plural': 'Subtitle Files',
                'ordering': ['relative_path'],
                'abstract': False,
                'constraints': [models.UniqueConstraint(fields=('media_item_id', 'relative_path'), name='extras_subtitlefile_path_unique')],
            },
        ),
        migrations.CreateModel(
            name='MetadataFile',
            fields=[
                *_extra_file_fields(),
                ('consumer', models.CharField(blank=True, default='', help_text='Name of the metadata writer that produced the file', max_length=128)),
                ('type', models.PositiveSmallIntegerField(choices=[(0, 'Unknown'), (1, 'Item metadata'), (2, 'Item image')], default=0)),
                ('hash', models.CharField(blank=True, default='', help_text='Content hash used to skip rewriting unchanged files', max_length=64)),
            ],
            options={
                'verbose_name': 'Metadata File',
                'verbose_name_plural': 'Metadata Files',
                'ordering': ['relative_path'],
                'abstract': False,
                'constraints': [models.UniqueConstraint(fields=('media_item_id', 'relative_path'), name='extras_metadatafile_path_unique')],
            },
        ),
        migrations.CreateModel(
            name='OtherExtraFile',
            fields=[
                *_extra_file_fields(),
            ],
            options={
                'verbose_name': 'Other Extra File',
                'verbose_name_plural': 'Other Extra Files',
                'ordering': ['relative_path'],
                'abstract': False,
                'constraints': [models.UniqueConstraint(fields=('media_item_id', 'relative_path'), name='extras_otherextrafile_path_unique')],
            },
        ),
    ]

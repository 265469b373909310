import django.db.models.deletion
import django.utils.timezone
import djblets.db.fields
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Revision',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True,
                                        serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255,
                                           verbose_name='title')),
                ('summary', models.TextField(blank=True,
                                             verbose_name='summary')),
                ('test_plan', models.TextField(blank=True,
                                               verbose_name='test plan')),
                ('status', models.PositiveSmallIntegerField(
                    choices=[(0, 'Needs Review'), (1, 'Needs Revision'),
                             (2, 'Accepted'), (3, 'Closed'),
                             (4, 'Abandoned'), (5, 'Changes Planned'),
                             (6, 'In Preparation')],
                    db_index=True,
                    default=0,
                    verbose_name='status')),
                ('line_count', models.PositiveIntegerField(
                    default=0,
                    verbose_name='line count')),
                ('time_added', models.DateTimeField(
                    default=django.utils.timezone.now,
                    verbose_name='time added')),
                ('last_updated', djblets.db.fields.ModificationTimestampField(
                    verbose_name='last updated')),
                ('author', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='revisions',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='author')),
                ('reviewers', models.ManyToManyField(
                    blank=True,
                    related_name='reviewed_revisions',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='reviewers')),
            ],
            options={
                'verbose_name': 'Revision',
                'verbose_name_plural': 'Revisions',
                'ordering': ['-last_updated', '-pk'],
            },
        ),
        migrations.CreateModel(
            name='ReplyDraft',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True,
                                        serialize=False, verbose_name='ID')),
                ('text', models.TextField(blank=True, verbose_name='text')),
                ('timestamp', models.DateTimeField(
                    default=django.utils.timezone.now,
                    verbose_name='timestamp')),
                ('revision', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='reply_drafts',
                    to='reviews.revision',
                    verbose_name='revision')),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='reply_drafts',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='user')),
            ],
            options={
                'verbose_name': 'Reply Draft',
                'verbose_name_plural': 'Reply Drafts',
                'unique_together': {('revision', 'user')},
            },
        ),
    ]
